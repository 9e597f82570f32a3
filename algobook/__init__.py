"""Algorithm problem solutions by topic, a terminal 2048 game and a README problem-list generator."""

__version__ = "0.1.0"