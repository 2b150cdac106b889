"""Sphere logo generator: draws the S.P.H.E.R.E logo and exports it as PNG or JPEG."""
