"""Employee population generation: name tables and the sampler."""
