"""Train Like Pros booking and roster backend."""
