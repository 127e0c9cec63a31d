"""FitSync personalization and recommendation engine."""
