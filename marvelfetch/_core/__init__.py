"""Internal building blocks: transport, envelope model and validators."""
