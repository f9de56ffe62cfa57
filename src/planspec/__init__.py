"""planspec: plans, specs, and the Required Specs section that links them."""

__version__ = "0.1.0"
