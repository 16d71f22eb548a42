"""Package-wide logging setup."""
