"""Auth module: JSON register / login / logout."""
