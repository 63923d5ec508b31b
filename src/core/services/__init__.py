"""Services: turning query tokens into lookup results."""
