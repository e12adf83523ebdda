from pathlib import Path
from typing import Callable, List, Sequence

import pytest

HELVETICA = b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>"


def _stream(data: bytes) -> bytes:
    return b"<< /Length %d >>\nstream\n" % len(data) + data + b"\nendstream"


def build_pdf(objects: Sequence[bytes]) -> bytes:
    """Serialize numbered objects (1-based, object 1 is the Catalog) with a valid xref table."""
    out = bytearray(b"%PDF-1.4\n")
    offsets: List[int] = []
    for number, body in enumerate(objects, start=1):
        offsets.append(len(out))
        out += b"%d 0 obj\n" % number + body + b"\nendobj\n"
    xref = len(out)
    out += b"xref\n0 %d\n" % (len(objects) + 1)
    out += b"0000000000 65535 f \n"
    for offset in offsets:
        out += b"%010d 00000 n \n" % offset
    out += b"trailer\n<< /Size %d /Root 1 0 R >>\nstartxref\n%d\n%%%%EOF\n" % (len(objects) + 1, xref)
    return bytes(out)


def text_pdf(*page_texts: str) -> bytes:
    """One Helvetica page per entry, each showing its text with a single Tj."""
    n = len(page_texts)
    font = 3 + 2 * n
    kids = " ".join(f"{3 + 2 * i} 0 R" for i in range(n)).encode()
    objects: List[bytes] = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        b"<< /Type /Pages /Kids [" + kids + b"] /Count %d >>" % n,
    ]
    for i, text in enumerate(page_texts):
        content = 4 + 2 * i
        objects.append(
            b"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 300 200] /Contents %d 0 R"
            b" /Resources << /Font << /F1 %d 0 R >> >> >>" % (content, font)
        )
        objects.append(_stream(b"BT /F1 12 Tf 20 100 Td (" + text.encode("latin-1") + b") Tj ET"))
    objects.append(HELVETICA)
    return build_pdf(objects)


BROKEN_PAGE_TREES = {
    "missing-pages": build_pdf([b"<< /Type /Catalog >>"]),
    "pages-not-a-reference": build_pdf([b"<< /Type /Catalog /Pages 7 >>"]),
    "kids-not-an-array": build_pdf(
        [b"<< /Type /Catalog /Pages 2 0 R >>", b"<< /Type /Pages /Kids 5 /Count 1 >>"]
    ),
}


@pytest.fixture()
def write_pdf(tmp_path: Path) -> Callable[[str, bytes], Path]:
    def _write(name: str, data: bytes) -> Path:
        path = tmp_path / name
        path.write_bytes(data)
        return path

    return _write
