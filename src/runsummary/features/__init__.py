"""Feature packages: path trimming, styled text wrapping and run summaries."""
