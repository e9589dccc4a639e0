"""Target language generators (types and resolver scaffolds)."""
