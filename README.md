# nietzsche

A toolkit for everyday image and PDF jobs: compressing, converting, cropping,
resizing, rotating, upscaling and watermarking images; turning images, office
documents and PDFs into PDF or PDF/A; OCR; page-range parsing and zipping
directories. It also has a small HTTP service that accepts file uploads into
local storage.

## Running the service

```
nietzsche-api
```

This starts the HTTP service on `0.0.0.0:8080`. Options:

| Option       | Default                          | Meaning              |
|--------------|----------------------------------|----------------------|
| `--storage`  | `storage`                        | upload directory     |
| `--base-url` | `https://nietzsche.example.com`  | public base URL      |
| `--host`     | `0.0.0.0`                        | address to listen on |
| `--port`     | `8080`                           | port to listen on    |

The upload directory is created when missing. Every response carries
`Access-Control-Allow-Origin: *`, and each request is logged. The routes are:

| Method | Path        | Response                                                              |
|--------|-------------|-----------------------------------------------------------------------|
| GET    | `/`         | `server`, a new `task` id (`task_<uuid>`) and `remaning_credits`      |
| POST   | `/upload`   | multipart form with `task` and `file`; answers `server_filename`      |
| POST   | `/process`  | a fixed `{"server", "task", "status": "success"}` body                |
| GET    | `/download` | the same fixed body as `/process`                                     |

Only `.pdf`, `.jpg`, `.jpeg`, `.png` and `.gif` uploads are accepted; a missing
file or a rejected upload answers 400 with an `error` message. Accepted files
are stored under a new UUID name that keeps the original extension.

To embed the service in your own application:

```python
from nietzsche.storage import LocalStorage
from nietzsche.service import Nietzsche
from nietzsche.api import create_app

storage = LocalStorage("storage", "https://files.example.com")
service = Nietzsche(storage)
app = create_app(service)           # a Flask application

task = service.start()              # StartResponse(server, task, remaining_credits)
stored = service.upload("cat.jpg", b"...")   # UploadResponse(server_file_name)
data = service.download(stored.server_file_name)
```

`Nietzsche.upload` raises `ValueError("invalid file type")` for other
extensions. `LocalStorage` also offers `get` (an open binary file), `delete`,
`url` (`<base_url>/<document_id>`) and `close`, and works as a context manager.
`FileStorage` is the abstract interface other backends can implement.

### What the service does not do

`/process` and `/download` do not process or return files; they answer with a
fixed placeholder body. The service has no processing step that ties the image
and PDF operations below to uploaded files, and no credit accounting (credit
numbers are random).

## Image operations

Each operation reads an image from one path and writes the result to another.
Failures raise `nietzsche.image.errors.ImageError`, whose `kind` is an
`ImageErrorKind` member such as "could not read file", "could not decode file"
or "invalid format".

```python
from nietzsche.image.compress import compress, CompressionLevel
from nietzsche.image.convert import convert
from nietzsche.image.crop import crop
from nietzsche.image.resize import resize
from nietzsche.image.rotate import rotate
from nietzsche.image.upscale import upscale

compress("cat.jpg", "cat_small.png", CompressionLevel.EXTREME)
convert("cat.jpg", "cat.gif", "gif")        # jpg/jpeg, png, gif/gif_animation
crop("cat.jpg", "cat_head.jpg", width=100, height=100, x=0, y=0)
resize("cat.jpg", "cat_half.jpg", resize_mode="percentage", percentage=50)
resize("cat.jpg", "cat_thumb.jpg", resize_mode="pixel",
       pixel_width=100, pixel_height=100)
rotate("cat.jpg", "cat_turned.jpg", angle=90)   # -360 .. 360, counter-clockwise
upscale("cat.jpg", "cat_big.jpg", multiplier=2) # 2 or 4
```

- `compress` always writes PNG; the levels `low`, `recommended` and `extreme`
  choose the zlib level (default, fastest, smallest).
- `crop`, `resize`, `rotate` and `upscale` save in the format given by the
  output extension (`.jpg`, `.jpeg`, `.png`, `.gif`, `.tif`, `.tiff`, `.bmp`).
- `resize` falls back to `pixel` mode for an unknown mode;
  `validate_resize_parameters` returns the effective mode or raises.
- `rotate` enlarges the canvas to fit and fills the corners with transparency.

### Watermarks

```python
from nietzsche.image.watermark import WatermarkElement, add_watermark

add_watermark(
    [WatermarkElement(type="image", image="logo.png", gravity="southeast",
                      transparency=50)],
    "photo.jpg",
    "photo_marked.jpg",
)
```

Elements are either `text` or `image`, applied in order; missing inputs raise
`ValueError`. `gravity` is one of `north`, `northeast`, `east`, `southeast`,
`south`, `southwest`, `west`, `northwest` or `center` (also used for anything
else), shifted by `vertical_adjustment_percentage` and
`horizontal_adjustment_percentage`. Image watermarks are lightly blurred,
scaled to a fifth of the base image's width and height, optionally rotated,
and faded by `transparency` percent. Text watermarks use `font_size` and
`font_color` (`#rrggbb`) and load the TrueType font `aria.ttf` from the
working directory. JPEG input is saved as JPEG; everything else as PNG.
`parse_color` and `calculate_position` can be used on their own.

## PDF operations

Failures raise `nietzsche.pdf.errors.PdfError`, whose `kind` is a
`PdfErrorKind` member and whose `detail` may hold more text.

```python
from nietzsche.pdf.from_image import from_image
from nietzsche.pdf.office import from_office
from nietzsche.pdf.pdfa import from_pdf_to_pdfa, build_ghostscript_args
from nietzsche.pdf.ocr import ocr_scan
from nietzsche.pdf.pages import parse_page_range
from nietzsche.pdf.archive import zip_folder

from_image("scan.jpg", "scan.pdf", orientation="Portrait", margin=10,
           page_size="A4")                        # A4, letter or fit (= A4)
from_office("report.docx", "out/")                # needs LibreOffice (soffice)
from_pdf_to_pdfa("doc.pdf", "doc_a.pdf", "pdfa-2b")  # needs Ghostscript (gs)
ocr_scan("scan.pdf", "scan_ocr.pdf")              # needs ocrmypdf

parse_page_range("1,3-5,7")   # ['1', '3', '4', '5', '7']
zip_folder("pages/", "pages.zip")
```

- `from_image` writes a one-page PDF itself; orientation is `Portrait` or
  `Landscape`, and the image fills a 210 x 297 mm area inside the margin.
- `from_office` accepts `.docx`, `.doc`, `.pptx`, `.ppt`, `.xlsx` and `.xls`.
- Supported PDF/A formats are `pdfa-1a`, `pdfa-1b`, `pdfa-2a`, `pdfa-2b`,
  `pdfa-2u`, `pdfa-3a`, `pdfa-3b` and `pdfa-3u`. `build_ghostscript_args`
  returns the Ghostscript argument list without running it; a failed run
  carries Ghostscript's error output in `detail`.
- `parse_page_range` raises `ValueError` for empty input, bad segments or a
  range whose start is after its end.
- `zip_folder` stores directories and deflates files, with entry names
  relative to the folder.

There is no PDF compression, merging, page rotation, password protection or
removal, splitting, Markdown conversion or web-page capture in this package.

## File helpers

`nietzsche.files` offers small helpers: `file_exists`, `folder_exists`,
`create_dir`, `create_file`, `write_file`, `delete_file`, `delete_dir`,
`list_dir` (sorted names), `read_file` (returning a `FileData`),
`is_valid_extension` (extensions include the dot) and `get_file_from_url`
(returning a `FileResponse`; raises `ValueError` for a non-HTTP URL or a name
that is not a PDF or image). Log output goes through `nietzsche.logs`
(`info`, `debug`, `warn`, `error`).