"""Supporting utilities (configuration loading)."""
