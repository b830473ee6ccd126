"""Pricing breakdown used by the pricing_strategy prompt."""

from pydantic import BaseModel, Field

TRANSACTION_FEE_RATE = 0.065
PAYMENT_PROCESSING_RATE = 0.03
PAYMENT_PROCESSING_FIXED = 0.25
LISTING_FEE = 0.20
WHOLESALE_MULTIPLIER = 2.0


class PricingBreakdown(BaseModel):
    """Cost, fee and price figures for one product (shop currency)."""

    material_cost: float = Field(description="Material cost per item")
    labor_cost: float = Field(description="Labor hours x hourly rate")
    base_cost: float = Field(description="Material + labor")
    wholesale_price: float = Field(description="Base cost x 2")
    retail_price: float = Field(description="Base cost x markup")
    transaction_fee: float = Field(description="6.5 % of retail price")
    processing_fee: float = Field(description="3 % of retail price + 0.25")
    listing_fee: float = Field(description="Flat listing fee")
    total_fees: float = Field(description="Sum of all Etsy fees at retail price")
    net_profit: float = Field(description="Retail price - base cost - fees")
    profit_margin: float = Field(description="Net profit as percent of retail price")
    breakeven_price: float = Field(
        description="Lowest price covering base cost and all fees"
    )


def calculate_pricing(
    material_cost: float,
    labor_hours: float,
    hourly_rate: float = 20.0,
    markup: float = 2.0,
) -> PricingBreakdown:
    """Calculate prices and Etsy fees for a handmade item.

    Args:
        material_cost: Material cost per item
        labor_hours: Hours of work per item
        hourly_rate: Hourly wage to pay yourself
        markup: Retail multiplier on the base cost

    Returns:
        PricingBreakdown with all figures
    """
    labor_cost = labor_hours * hourly_rate
    base_cost = material_cost + labor_cost
    retail_price = base_cost * markup

    transaction_fee = retail_price * TRANSACTION_FEE_RATE
    processing_fee = retail_price * PAYMENT_PROCESSING_RATE + PAYMENT_PROCESSING_FIXED
    total_fees = transaction_fee + processing_fee + LISTING_FEE
    net_profit = retail_price - base_cost - total_fees

    fixed_fees = PAYMENT_PROCESSING_FIXED + LISTING_FEE
    percentage_fees = TRANSACTION_FEE_RATE + PAYMENT_PROCESSING_RATE

    return PricingBreakdown(
        material_cost=material_cost,
        labor_cost=labor_cost,
        base_cost=base_cost,
        wholesale_price=base_cost * WHOLESALE_MULTIPLIER,
        retail_price=retail_price,
        transaction_fee=transaction_fee,
        processing_fee=processing_fee,
        listing_fee=LISTING_FEE,
        total_fees=total_fees,
        net_profit=net_profit,
        profit_margin=(net_profit / retail_price * 100) if retail_price else 0.0,
        breakeven_price=(base_cost + fixed_fees) / (1 - percentage_fees),
    )
