"""Core data models for staffgen."""
