"""Console, timing, plotting and bit-string helpers for the RSA lab."""
