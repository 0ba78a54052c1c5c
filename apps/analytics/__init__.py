"""Read-only projections: movements feed, dashboard and spending summaries."""
