"""Harbor assignment domain."""
