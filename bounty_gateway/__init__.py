"""Read-only JSON gateway for the GnoBounty realm."""
