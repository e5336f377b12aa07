"""Player Service: an in-memory player directory served over HTTP."""
