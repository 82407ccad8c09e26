"""Date handling and git access for gitcommit."""
