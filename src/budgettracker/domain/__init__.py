"""Domain types shared by repositories and services."""
