"""taskflow - task tracking REST API."""
