"""Application layer – the coordinator modules driving the locator page."""
