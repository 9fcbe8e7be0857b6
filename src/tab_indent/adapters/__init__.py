"""Host integrations for concrete UI toolkits."""
