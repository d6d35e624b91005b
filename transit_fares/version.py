"""Calculator version stamped on DataFrame output. Bump when fare logic or reference data changes."""

VERSION = "2025.08.01"
