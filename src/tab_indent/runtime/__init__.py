"""Runtime services shared by adapters and hosts."""
