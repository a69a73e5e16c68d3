"""Qt-free value-adjustment engine."""
