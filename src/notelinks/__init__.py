"""notelinks — extract links and hashtags from markdown notes."""

__version__ = "0.1.0"
