"""Config – 12-factor settings for the locator page."""
