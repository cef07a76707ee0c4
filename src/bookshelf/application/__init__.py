"""Application services composing features into runnable flows."""
