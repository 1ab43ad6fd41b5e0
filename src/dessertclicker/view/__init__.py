"""The VIEW layer: Qt widgets that display session snapshots."""
