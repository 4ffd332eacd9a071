"""
上传文件校验：大小 / 扩展名 / MIME 三道检查的顺序与边界。
"""
import pytest

from hireai.core.config import MAX_UPLOAD_BYTES
from hireai.ingest.validation import (
    EXTENSION_ERROR,
    MIME_ERROR,
    SIZE_ERROR,
    file_extension,
    mime_type_for,
    validate_resume_file,
)


def test_pdf_two_megabytes_is_valid():
    r = validate_resume_file("resume.pdf", 2 * 1024 * 1024, "application/pdf")
    assert r.valid
    assert r.error is None


def test_size_over_limit_rejected_regardless_of_extension():
    """超过 10 MiB 一律拒绝，且优先于扩展名检查。"""
    for name in ("resume.pdf", "photo.png", "notes.txt"):
        r = validate_resume_file(name, MAX_UPLOAD_BYTES + 1, "application/pdf")
        assert not r.valid
        assert r.error == SIZE_ERROR


def test_size_exactly_at_limit_is_valid():
    assert validate_resume_file("resume.pdf", MAX_UPLOAD_BYTES, "application/pdf").valid


def test_unsupported_extension_rejected_even_with_valid_mime():
    r = validate_resume_file("resume.txt", 1024, "application/pdf")
    assert not r.valid
    assert r.error == EXTENSION_ERROR


def test_missing_extension_rejected():
    r = validate_resume_file("resume", 1024, "application/pdf")
    assert r.error == EXTENSION_ERROR


def test_invalid_mime_rejected():
    r = validate_resume_file("resume.pdf", 1024, "text/plain")
    assert not r.valid
    assert r.error == MIME_ERROR


@pytest.mark.parametrize("name,mime", [
    ("cv.DOCX", "application/vnd.openxmlformats-officedocument.wordprocessingml.document"),
    ("cv.doc", "application/msword"),
    ("scan.JPG", "image/jpg"),
    ("scan.jpeg", "image/jpeg"),
    ("scan.webp", "image/webp"),
    ("scan.bmp", "image/bmp"),
    ("scan.gif", ""),
])
def test_allowed_types(name, mime):
    """扩展名大小写不敏感；MIME 为空时放行。"""
    assert validate_resume_file(name, 10, mime).valid


def test_file_extension_and_mime_lookup():
    assert file_extension("My Resume.PDF") == ".pdf"
    assert file_extension("noext") == ""
    assert mime_type_for("a.jpg") == "image/jpeg"
    assert mime_type_for("a.docx").endswith("wordprocessingml.document")
    assert mime_type_for("a.xyz") == "application/octet-stream"


def test_dotfile_name_uses_text_after_last_dot():
    """扩展名取最后一个点之后：".pdf" 视为 PDF，"resume.final.docx" 视为 DOCX。"""
    assert file_extension(".pdf") == ".pdf"
    assert validate_resume_file(".pdf", 10, "application/pdf").valid
    assert file_extension("resume.final.docx") == ".docx"
