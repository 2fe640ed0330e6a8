"""Testing – in-memory doubles for the locator's external collaborators."""
