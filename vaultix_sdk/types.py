"""
Location: vaultix_sdk/types.py

Summary:
    Pydantic models for vaultix-sdk. Mirrors the JSON contracts of the
    Vaultix API: resource objects returned by the server (Charge, Customer,
    Refund, Payout, ...) and the parameter sets accepted by each endpoint.

Usage:
    Resource modules validate responses into these models and serialize
    parameter models into request payloads. All monetary amounts are
    integers in minor currency units (cents); timestamps are ISO 8601
    strings exactly as sent by the server.

    Response models keep unknown fields, so new API attributes are
    available via model_extra without an SDK upgrade.

Example:
    from vaultix_sdk.types import Charge, ChargeCreateParams

    params = ChargeCreateParams(amount=5000, payment_method="pix")
    params.to_payload()  # {"amount": 5000, "payment_method": "pix"}

    charge = Charge.model_validate(response_json)
    print(charge.status, charge.pix.qr_code)
"""

from typing import Any, Generic, Literal, Optional, TypeVar

from pydantic import BaseModel, Field


T = TypeVar("T")

# Known values, enforced on request parameters only. Response models take
# plain strings so new server values still parse.
Currency = Literal["BRL", "USD", "EUR"]
PaymentMethod = Literal["pix", "credit_card", "boleto"]

ChargeStatus = Literal[
    "pending", "authorized", "paid", "failed", "canceled", "refunded", "expired"
]
RefundReason = Literal["requested_by_customer", "duplicate", "fraudulent"]
BalanceTransactionType = Literal["charge", "refund", "payout", "adjustment"]
PaymentLinkStatus = Literal["active", "inactive", "expired"]
PayoutStatus = Literal["pending", "in_transit", "paid", "failed", "canceled"]
OrderStatus = Literal["pending", "processing", "completed", "canceled", "refunded"]
OrderPaymentStatus = Literal["pending", "paid", "failed", "refunded"]
FulfillmentStatus = Literal[
    "unfulfilled", "partial", "fulfilled", "shipped", "delivered"
]
SummaryPeriod = Literal["24h", "7d", "30d", "90d"]


class VaultixObject(BaseModel):
    """Base for objects returned by the API. Unknown fields are kept."""

    model_config = {"extra": "allow"}


class VaultixParams(BaseModel):
    """Base for request parameter sets."""

    model_config = {"extra": "allow"}

    def to_payload(self) -> dict[str, Any]:
        """Serialize to a JSON-ready dict, dropping unset fields."""
        return self.model_dump(mode="json", exclude_none=True)


# ============================================
# COMMON
# ============================================

class ListParams(VaultixParams):
    """
    Cursor pagination parameters shared by list endpoints.

    Attributes:
        limit: Number of items to return (max 100)
        starting_after: Return items after this object ID
    """
    limit: Optional[int] = None
    starting_after: Optional[str] = None


class ListResponse(BaseModel, Generic[T]):
    """
    Envelope returned by every list endpoint.

    Attributes:
        object: Always "list"
        data: Items on this page
        has_more: Whether another page exists after this one
        total_count: Total number of matching items, when reported
    """
    object: Literal["list"] = "list"
    data: list[T] = Field(default_factory=list)
    has_more: bool = False
    total_count: Optional[int] = None

    model_config = {"extra": "allow"}


class DeletedObject(VaultixObject):
    """Confirmation returned by DELETE endpoints."""
    id: str
    object: Optional[str] = None
    deleted: bool


class Address(VaultixObject):
    line1: Optional[str] = None
    line2: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[str] = None


# ============================================
# CHARGES
# ============================================

class ChargeCustomerParams(VaultixParams):
    """Inline customer data for a charge; pass id to reuse a customer."""
    id: Optional[str] = None
    name: Optional[str] = None
    email: Optional[str] = None
    document: Optional[str] = None
    phone: Optional[str] = None


class ChargeCardParams(VaultixParams):
    """Card options: a token from tokens.create plus capture settings."""
    token: str
    installments: Optional[int] = None
    capture: Optional[bool] = None


class ChargeBoletoParams(VaultixParams):
    due_date: Optional[str] = None
    instructions: Optional[str] = None


class ChargeCreateParams(VaultixParams):
    """
    Parameters for creating a charge.

    Attributes:
        amount: Amount in cents (minimum 100 = R$ 1,00)
        currency: Currency code, server default when omitted
        payment_method: pix, credit_card or boleto
        customer: Customer information or reference
        description: Description shown to the payer
        metadata: Free-form key/value data
        card: Card token and capture options (credit_card only)
        boleto: Boleto options (boleto only)
    """
    amount: int
    currency: Optional[Currency] = None
    payment_method: PaymentMethod
    customer: Optional[ChargeCustomerParams] = None
    description: Optional[str] = None
    metadata: Optional[dict[str, Any]] = None
    card: Optional[ChargeCardParams] = None
    boleto: Optional[ChargeBoletoParams] = None


class ChargeListParams(ListParams):
    status: Optional[ChargeStatus] = None
    payment_method: Optional[PaymentMethod] = None


class ChargeCaptureParams(VaultixParams):
    """Omit amount for a full capture."""
    amount: Optional[int] = None


class PixDetails(VaultixObject):
    qr_code: str
    qr_code_url: Optional[str] = None
    expires_at: Optional[str] = None


class CardDetails(VaultixObject):
    brand: str
    last4: str
    exp_month: Optional[int] = None
    exp_year: Optional[int] = None
    name: Optional[str] = None


class BoletoDetails(VaultixObject):
    barcode: str
    barcode_url: Optional[str] = None
    pdf_url: Optional[str] = None
    due_date: Optional[str] = None


class Charge(VaultixObject):
    """
    A request to collect payment via PIX, card or boleto.

    Attributes:
        id: Charge identifier (ch_...)
        amount: Amount in cents
        status: Current lifecycle status
        pix: PIX QR code data (pix charges)
        card: Masked card data (credit_card charges)
        boleto: Barcode and PDF links (boleto charges)
        livemode: False for charges created with a test key
    """
    id: str
    object: Literal["charge"] = "charge"
    amount: int
    currency: Optional[str] = None
    payment_method: str
    status: str
    description: Optional[str] = None
    metadata: Optional[dict[str, Any]] = None
    created: Optional[str] = None
    livemode: bool = False
    pix: Optional[PixDetails] = None
    card: Optional[CardDetails] = None
    boleto: Optional[BoletoDetails] = None


# ============================================
# CUSTOMERS
# ============================================

class CustomerCreateParams(VaultixParams):
    name: str
    email: str
    document: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[Address] = None
    metadata: Optional[dict[str, Any]] = None


class CustomerUpdateParams(VaultixParams):
    """Partial update; only the fields given are changed."""
    name: Optional[str] = None
    email: Optional[str] = None
    document: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[Address] = None
    metadata: Optional[dict[str, Any]] = None


class Customer(VaultixObject):
    id: str
    object: Literal["customer"] = "customer"
    name: str
    email: str
    document: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[Address] = None
    metadata: Optional[dict[str, Any]] = None
    created: Optional[str] = None
    livemode: bool = False


# ============================================
# TOKENS
# ============================================

class TokenCardParams(VaultixParams):
    number: str
    exp_month: int
    exp_year: int
    cvc: str
    name: Optional[str] = None


class TokenCreateParams(VaultixParams):
    card: TokenCardParams


class Token(VaultixObject):
    """
    Single-use card token. Tokens expire 15 minutes after creation.
    """
    id: str
    object: Literal["token"] = "token"
    card: CardDetails
    created: Optional[str] = None
    livemode: bool = False
    used: bool = False


# ============================================
# REFUNDS
# ============================================

class RefundCreateParams(VaultixParams):
    """
    Attributes:
        charge: Charge ID to refund
        amount: Amount in cents, defaults to the full charge amount
        reason: Reason for the refund
    """
    charge: str
    amount: Optional[int] = None
    reason: Optional[RefundReason] = None


class RefundListParams(ListParams):
    charge: Optional[str] = None


class Refund(VaultixObject):
    id: str
    object: Literal["refund"] = "refund"
    amount: int
    charge: str
    status: str
    reason: Optional[str] = None
    created: Optional[str] = None
    livemode: bool = False


# ============================================
# BALANCE
# ============================================

class BalanceAmount(VaultixObject):
    amount: int
    currency: str


class Balance(VaultixObject):
    object: Literal["balance"] = "balance"
    available: list[BalanceAmount] = Field(default_factory=list)
    pending: list[BalanceAmount] = Field(default_factory=list)
    livemode: bool = False


class BalanceTransaction(VaultixObject):
    id: str
    object: Literal["balance_transaction"] = "balance_transaction"
    amount: int
    type: str
    source: Optional[str] = None
    description: Optional[str] = None
    created: Optional[str] = None
    status: str


class BalanceTransactionListParams(ListParams):
    type: Optional[BalanceTransactionType] = None


# ============================================
# PAYMENT LINKS
# ============================================

class PaymentLinkCreateParams(VaultixParams):
    """
    Attributes:
        amount: Amount in cents
        payment_methods: Allowed payment methods
        success_url: Redirect after successful payment
        cancel_url: Redirect if the payer cancels
        expires_at: ISO 8601 expiration timestamp
        max_uses: Maximum number of payments accepted
        customer_email: Pre-filled payer email
        collect_customer_info: Whether to ask the payer for details
    """
    amount: int
    currency: Optional[Currency] = None
    description: Optional[str] = None
    payment_methods: Optional[list[PaymentMethod]] = None
    success_url: Optional[str] = None
    cancel_url: Optional[str] = None
    expires_at: Optional[str] = None
    max_uses: Optional[int] = None
    customer_email: Optional[str] = None
    collect_customer_info: Optional[bool] = None
    metadata: Optional[dict[str, Any]] = None


class PaymentLinkListParams(ListParams):
    status: Optional[PaymentLinkStatus] = None


class PaymentLink(VaultixObject):
    id: str
    object: Literal["payment_link"] = "payment_link"
    url: str
    short_code: Optional[str] = None
    amount: int
    currency: Optional[str] = None
    description: Optional[str] = None
    payment_methods: list[str] = Field(default_factory=list)
    success_url: Optional[str] = None
    cancel_url: Optional[str] = None
    expires_at: Optional[str] = None
    max_uses: Optional[int] = None
    current_uses: int = 0
    metadata: Optional[dict[str, Any]] = None
    status: str
    created: Optional[str] = None
    livemode: bool = False


# ============================================
# PAYOUTS
# ============================================

class PayoutDestinationParams(VaultixParams):
    """Either pix_key, or the bank account fields."""
    pix_key: Optional[str] = None
    bank_code: Optional[str] = None
    branch: Optional[str] = None
    account: Optional[str] = None
    account_type: Optional[Literal["checking", "savings"]] = None
    holder_name: Optional[str] = None
    holder_document: Optional[str] = None


class PayoutCreateParams(VaultixParams):
    amount: int
    currency: Optional[Currency] = None
    destination: PayoutDestinationParams
    description: Optional[str] = None
    metadata: Optional[dict[str, Any]] = None


class PayoutListParams(ListParams):
    status: Optional[PayoutStatus] = None


class PayoutDestination(VaultixObject):
    type: str
    pix_key: Optional[str] = None
    bank_code: Optional[str] = None
    branch: Optional[str] = None
    account: Optional[str] = None
    holder_name: Optional[str] = None


class Payout(VaultixObject):
    id: str
    object: Literal["payout"] = "payout"
    amount: int
    currency: Optional[str] = None
    destination: PayoutDestination
    description: Optional[str] = None
    metadata: Optional[dict[str, Any]] = None
    status: str
    estimated_arrival: Optional[str] = None
    arrival_date: Optional[str] = None
    failure_code: Optional[str] = None
    failure_message: Optional[str] = None
    created: Optional[str] = None
    livemode: bool = False


# ============================================
# PRODUCTS
# ============================================

class ProductDimensions(VaultixObject):
    length: Optional[float] = None
    width: Optional[float] = None
    height: Optional[float] = None
    unit: Optional[str] = None


class ProductMeta(VaultixObject):
    title: Optional[str] = None
    description: Optional[str] = None
    keywords: Optional[list[str]] = None


class ProductStats(VaultixObject):
    view_count: Optional[int] = None
    sale_count: Optional[int] = None
    rating_average: Optional[float] = None
    rating_count: Optional[int] = None


class Product(VaultixObject):
    """
    A catalog product. price, compare_price and cost_price are in cents.
    """
    id: str
    object: Literal["product"] = "product"
    name: str
    description: Optional[str] = None
    short_description: Optional[str] = None
    slug: Optional[str] = None
    sku: Optional[str] = None
    barcode: Optional[str] = None
    price: int
    compare_price: Optional[int] = None
    cost_price: Optional[int] = None
    currency: Optional[str] = None
    stock_quantity: int = 0
    stock_status: Optional[str] = None
    track_inventory: bool = False
    status: str
    visibility: Optional[str] = None
    is_active: bool = False
    is_featured: bool = False
    is_digital: bool = False
    featured_image: Optional[str] = None
    images: Optional[list[str]] = None
    gallery_urls: Optional[list[str]] = None
    has_variants: bool = False
    variant_options: Optional[dict[str, Any]] = None
    category_id: Optional[str] = None
    tags: Optional[list[str]] = None
    attributes: Optional[dict[str, Any]] = None
    weight: Optional[float] = None
    weight_unit: Optional[str] = None
    dimensions: Optional[ProductDimensions] = None
    meta: Optional[ProductMeta] = None
    stats: Optional[ProductStats] = None
    metadata: Optional[dict[str, Any]] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    published_at: Optional[str] = None
    livemode: bool = False


class ProductUpdateParams(VaultixParams):
    """Partial update; dimensions and SEO fields are sent flat."""
    name: Optional[str] = None
    description: Optional[str] = None
    short_description: Optional[str] = None
    sku: Optional[str] = None
    barcode: Optional[str] = None
    price: Optional[int] = None
    compare_price: Optional[int] = None
    cost_price: Optional[int] = None
    stock_quantity: Optional[int] = None
    track_inventory: Optional[bool] = None
    status: Optional[Literal["active", "draft", "archived"]] = None
    visibility: Optional[Literal["visible", "hidden"]] = None
    is_featured: Optional[bool] = None
    is_digital: Optional[bool] = None
    featured_image: Optional[str] = None
    images: Optional[list[str]] = None
    category_id: Optional[str] = None
    tags: Optional[list[str]] = None
    attributes: Optional[dict[str, Any]] = None
    weight: Optional[float] = None
    weight_unit: Optional[str] = None
    length: Optional[float] = None
    width: Optional[float] = None
    height: Optional[float] = None
    dimension_unit: Optional[str] = None
    meta_title: Optional[str] = None
    meta_description: Optional[str] = None
    meta_keywords: Optional[list[str]] = None
    metadata: Optional[dict[str, Any]] = None


class ProductCreateParams(ProductUpdateParams):
    name: str
    price: int


class ProductListParams(ListParams):
    ending_before: Optional[str] = None
    status: Optional[Literal["active", "draft", "archived"]] = None
    category_id: Optional[str] = None
    is_active: Optional[bool] = None
    is_featured: Optional[bool] = None
    search: Optional[str] = None


# ============================================
# ORDERS
# ============================================

class OrderItem(VaultixObject):
    id: str
    object: Literal["order_item"] = "order_item"
    product_id: Optional[str] = None
    variant_id: Optional[str] = None
    name: str
    sku: Optional[str] = None
    quantity: int
    unit_price: int
    subtotal: int
    discount: Optional[int] = None
    tax: Optional[int] = None
    total: int
    metadata: Optional[dict[str, Any]] = None


class OrderAmounts(VaultixObject):
    subtotal: int
    discount: Optional[int] = None
    shipping: Optional[int] = None
    tax: Optional[int] = None
    total: int


class OrderPayment(VaultixObject):
    method: Optional[str] = None
    details: Optional[dict[str, Any]] = None
    transaction_id: Optional[str] = None


class OrderShipping(VaultixObject):
    method: Optional[str] = None
    carrier: Optional[str] = None
    tracking_number: Optional[str] = None
    estimated_delivery: Optional[str] = None
    delivered_at: Optional[str] = None


class OrderNotes(VaultixObject):
    customer: Optional[str] = None
    internal: Optional[str] = None


class Order(VaultixObject):
    id: str
    object: Literal["order"] = "order"
    order_number: str
    status: str
    payment_status: str
    fulfillment_status: str
    customer_id: Optional[str] = None
    seller_id: Optional[str] = None
    billing_address: Optional[dict[str, Any]] = None
    shipping_address: Optional[dict[str, Any]] = None
    amounts: OrderAmounts
    currency: Optional[str] = None
    payment: Optional[OrderPayment] = None
    shipping: Optional[OrderShipping] = None
    items: Optional[list[OrderItem]] = None
    notes: Optional[OrderNotes] = None
    metadata: Optional[dict[str, Any]] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    livemode: bool = False


class OrderListParams(ListParams):
    ending_before: Optional[str] = None
    status: Optional[OrderStatus] = None
    payment_status: Optional[OrderPaymentStatus] = None
    fulfillment_status: Optional[FulfillmentStatus] = None
    customer_id: Optional[str] = None
    created_gte: Optional[str] = None
    created_lte: Optional[str] = None
    expand: Optional[list[str]] = None


# ============================================
# TRANSACTIONS
# ============================================

class Transaction(VaultixObject):
    """
    Unified view over charges, refunds and payouts.

    fee_amount and net_amount are in cents; source_id points at the
    underlying charge, refund or payout.
    """
    id: str
    object: Literal["transaction"] = "transaction"
    type: str
    status: str
    amount: int
    currency: Optional[str] = None
    fee_amount: Optional[int] = None
    net_amount: Optional[int] = None
    converted_amount: Optional[int] = None
    conversion_rate: Optional[float] = None
    payment_method: Optional[str] = None
    source: Optional[str] = None
    source_id: Optional[str] = None
    description: Optional[str] = None
    customer_id: Optional[str] = None
    wallet_id: Optional[str] = None
    destination: Optional[dict[str, Any]] = None
    metadata: Optional[dict[str, Any]] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    livemode: bool = False


class TransactionListParams(ListParams):
    ending_before: Optional[str] = None
    type: Optional[Literal["charge", "refund", "payout"]] = None
    status: Optional[str] = None
    payment_method: Optional[str] = None
    source: Optional[Literal["charge", "refund", "payout"]] = None
    created_gte: Optional[str] = None
    created_lte: Optional[str] = None
    min_amount: Optional[int] = None
    max_amount: Optional[int] = None


class ChargeTotals(VaultixObject):
    total_amount: int = 0
    total_count: int = 0
    paid_amount: int = 0
    paid_count: int = 0
    pending_amount: int = 0
    pending_count: int = 0
    failed_count: int = 0
    total_fees: int = 0


class Totals(VaultixObject):
    total_amount: int = 0
    total_count: int = 0


class TransactionSummary(VaultixObject):
    object: Literal["transaction_summary"] = "transaction_summary"
    period: str
    currency: Optional[str] = None
    charges: ChargeTotals = Field(default_factory=ChargeTotals)
    refunds: Totals = Field(default_factory=Totals)
    payouts: Totals = Field(default_factory=Totals)
    net_amount: int = 0


# ============================================
# SANDBOX
# ============================================

class SandboxChargeFailParams(VaultixParams):
    failure_code: Optional[str] = None
    failure_message: Optional[str] = None


class SandboxWebhookTestParams(VaultixParams):
    event_type: Optional[str] = None
    payload: Optional[dict[str, Any]] = None


class WebhookTestResult(VaultixObject):
    success: bool
    status_code: Optional[int] = None
    error: Optional[str] = None
    event_id: Optional[str] = None
    event_type: Optional[str] = None
    webhook_url: Optional[str] = None
    message: Optional[str] = None


class TestCard(VaultixObject):
    """A sandbox card number and the behavior it triggers."""

    number: str
    brand: str
    behavior: str
    description: Optional[str] = None


class TestCardList(ListResponse[TestCard]):
    """Test cards plus the CVC and expiry accepted for all of them."""

    cvc: Optional[str] = None
    expiry: Optional[str] = None
