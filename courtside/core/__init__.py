"""Core domain types: enums, models and the playbook."""
