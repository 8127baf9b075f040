"""TruthCheck: grounded fact-checking of free-text claims with Gemini."""

__version__ = "0.1.0"
