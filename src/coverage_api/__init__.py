"""coverage-api — coverage resolution for the ISP onboarding widget."""

__version__ = "0.1.0"
