"""Business services. Each one takes a RequestContext."""
