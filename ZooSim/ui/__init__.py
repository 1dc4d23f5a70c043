"""Console presentation for ZooSim (menus and reports)."""
