"""HTTP service for the Prusti diagnostic annotator."""
