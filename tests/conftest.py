import io
import json

import pytest
from reportlab.lib.pagesizes import A4
from reportlab.pdfgen import canvas


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page PDF with known text content."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=A4)
    c.drawString(72, 760, "Civil Judgment of the District Court")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    """Generate a two-page PDF with known text on each page."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=A4)
    c.drawString(72, 760, "Page one content")
    c.showPage()
    c.drawString(72, 760, "Page two content")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def empty_pdf_bytes() -> bytes:
    """Generate a valid PDF with no text content (blank page)."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=A4)
    c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture()
def analysis_payload() -> dict[str, object]:
    """A reply payload that satisfies every analysis schema rule."""
    return {
        "summary": "原告請求侵權行為損害賠償，法院判決被告應給付新臺幣十萬元。",
        "caseInfo": {
            "caseNumber": "112年度訴字第789號",
            "court": "臺灣臺北地方法院",
            "parties": {"plaintiff": "王小明", "defendant": "李大華"},
        },
        "favorablePoints": ["法院駁回原告精神慰撫金之請求。"],
        "unfavorablePoints": ["法院認定被告駕車未注意車前狀況。"],
        "legalGrounds": ["民法第184條第1項前段", "民法第195條"],
        "appealableIssues": ["過失比例之認定未審酌原告亦有闖紅燈之情形。"],
        "recommendedStrategy": "建議於收受判決後二十日內提起上訴，並聲請調閱路口監視器畫面。",
    }


@pytest.fixture()
def analysis_reply(analysis_payload: dict[str, object]) -> str:
    return json.dumps(analysis_payload, ensure_ascii=False)
