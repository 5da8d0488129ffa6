__version__ = "2023.3.18"
