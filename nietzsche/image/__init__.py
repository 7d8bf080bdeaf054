"""Image operations: compress, convert, crop, resize, rotate, upscale, watermark."""