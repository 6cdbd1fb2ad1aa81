"""Calendar side of wastecal: models, date expansion, overrides and ICS output."""
