"""Number classification primitives used by `calllog.helper`."""
