"""Command line interface for LaunchHub identity administration."""
