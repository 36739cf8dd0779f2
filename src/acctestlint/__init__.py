"""acctestlint: static checks for Terraform acceptance tests."""

__version__ = "0.1.0"
