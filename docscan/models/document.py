"""
Result document shapes returned by POST /analyze.

Replies from the model are not validated against these; they describe the
contract the prompt asks for and are used to build the fallback document.
"""

from typing import Any, Literal

from pydantic import BaseModel, Field


class LineItem(BaseModel):
    name: str = ""
    qty: str = ""
    unit_price: str = ""
    line_total: str = ""
    sku: str = ""


class TaxLine(BaseModel):
    name: str = ""
    rate: str = ""  # numeric string, no percent sign
    amount: str = ""


class Adjustment(BaseModel):
    """A discount or fee line."""
    name: str = ""
    amount: str = ""


class Confidence(BaseModel):
    total: float = 0
    items: float = 0


class FinancialDocument(BaseModel):
    document_type: Literal["receipt", "invoice"] = "receipt"
    vendor_name: str = ""
    vendor_address: str = ""
    vendor_phone: str = ""
    date: str = ""
    time: str = ""
    currency: str = ""
    invoice_number: str = ""
    order_number: str = ""
    payment_method: str = ""
    last4: str = ""
    items: list[LineItem] = Field(default_factory=list)
    subtotal: str = ""
    taxes: list[TaxLine] = Field(default_factory=list)
    discounts: list[Adjustment] = Field(default_factory=list)
    fees: list[Adjustment] = Field(default_factory=list)
    tips: str = ""
    total: str = ""
    notes: str = ""
    confidence: Confidence = Field(default_factory=Confidence)


class OtherDocument(BaseModel):
    document_type: Literal["other"] = "other"
    title: str = ""
    summary: str = ""
    notes: str = ""


def fallback_document(raw_text: str) -> dict:
    """Generic document carrying the unparseable reply verbatim in notes."""
    return OtherDocument(title="Analysis", summary="", notes=raw_text).model_dump()


class AnalyzeResponse(BaseModel):
    ok: bool = True
    data: Any


class ErrorResponse(BaseModel):
    error: str
