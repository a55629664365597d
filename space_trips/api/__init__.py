"""HTTP and GraphQL surface."""
