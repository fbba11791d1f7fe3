"""Services: the wizard and the topics it sequences."""
