"""HTTP layer serving measure badges."""
