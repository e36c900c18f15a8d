"""Critical Mind: topic ranking and progress engine."""
