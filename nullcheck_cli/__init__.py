"""nullcheck-cli: nullability annotation checks for Objective-C header import graphs."""

__version__ = "1.0.0"
