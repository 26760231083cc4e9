"""Turn an uploaded image or PDF into a small validated JSON artifact."""
