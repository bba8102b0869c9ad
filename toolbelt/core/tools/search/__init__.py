"""ScaleSERP search tools."""
