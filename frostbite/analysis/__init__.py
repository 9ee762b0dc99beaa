"""Call graph construction and reachability over library methods."""
