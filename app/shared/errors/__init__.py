"""Exception handlers turning domain error categories into JSON error responses."""
