"""Core assembly and recovery functionality for sail."""
