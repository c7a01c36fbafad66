"""Image fit algorithms: geometry, orientation, watermarking and the resize pipeline."""
