"""Shopping list parsing: free-form text in, sorted and categorized items out."""
