"""termsketch — vector shapes rendered onto a character grid."""

__version__ = "0.1.0"
