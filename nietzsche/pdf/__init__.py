"""PDF operations: image, office and PDF/A conversion, OCR, page ranges and zipping."""