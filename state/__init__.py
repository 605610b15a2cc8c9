"""Observable dashboard state and the fetch orchestration that drives it."""
