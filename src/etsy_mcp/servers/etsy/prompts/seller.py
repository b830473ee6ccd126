"""Prompt templates for Etsy sellers."""

from fastmcp import FastMCP

from etsy_mcp.schemas.etsy.pricing import calculate_pricing


def _money(value: float) -> str:
    return f"${value:.2f}"


def register_seller_prompts(mcp: FastMCP) -> None:
    """Register seller prompts on the given MCP server.

    Args:
        mcp: The FastMCP server instance to register prompts on
    """

    @mcp.prompt
    def create_listing_guide(
        product_type: str, target_audience: str | None = None
    ) -> str:
        """Draft a complete, search-optimized listing for a new product."""
        audience = (
            f"The target audience is: {target_audience}."
            if target_audience
            else "Infer the most likely buyers from the product type."
        )
        return f"""
You are helping an Etsy seller create a new listing for: **{product_type}**.
{audience}

1. Read `etsy://guides/seo` and `etsy://reference/when-made`.
2. Use `search_listings` with 2-3 buyer-style keyword phrases to see how
   competitors title, tag and price similar items.
3. Draft the listing:
   - **Title** (max 140 characters, most important keywords first)
   - **Description** (first sentence repeats the key phrase; then materials,
     size, care, shipping)
   - **13 tags** (multi-word phrases, max 20 characters each)
   - **who_made** and **when_made** values
   - **Suggested price** (use the `pricing_strategy` prompt if costs are known)
4. Ask the seller for quantity and taxonomy_id if they are unknown.
5. Only after the seller confirms, call `create_listing`.
"""

    @mcp.prompt
    def pricing_strategy(
        material_cost: float,
        labor_hours: float,
        hourly_rate: float = 20.0,
        markup: float = 2.0,
    ) -> str:
        """Price a handmade item from its costs, including Etsy fees."""
        pricing = calculate_pricing(
            material_cost=material_cost,
            labor_hours=labor_hours,
            hourly_rate=hourly_rate,
            markup=markup,
        )
        return f"""
You are advising an Etsy seller on pricing. Here is the cost calculation:

## Costs
- Materials: {_money(pricing.material_cost)}
- Labor: {labor_hours:g} h x {_money(hourly_rate)} = {_money(pricing.labor_cost)}
- **Base cost: {_money(pricing.base_cost)}**

## Prices
- Wholesale (2x base cost): {_money(pricing.wholesale_price)}
- **Retail ({markup:g}x base cost): {_money(pricing.retail_price)}**
- Breakeven after fees: {_money(pricing.breakeven_price)}

## Etsy fees at retail price
- Transaction fee (6.5 %): {_money(pricing.transaction_fee)}
- Payment processing (3 % + $0.25): {_money(pricing.processing_fee)}
- Listing fee: {_money(pricing.listing_fee)}
- **Total fees: {_money(pricing.total_fees)}**

## Result
- Net profit per sale: {_money(pricing.net_profit)}
- Profit margin: {pricing.profit_margin:.1f} %

Next steps:
1. Use `search_listings` (sort_on="price") to compare with similar items.
2. Explain whether the retail price is competitive and suggest adjustments
   (bundles, premium variants, free-shipping pricing).
3. Never recommend a price below the breakeven price.
"""

    @mcp.prompt
    def seo_optimization(
        listing_title: str, listing_description: str | None = None
    ) -> str:
        """Improve the title, tags and description of an existing listing."""
        description = (
            f"\nCurrent description:\n\n{listing_description}\n"
            if listing_description
            else ""
        )
        return f"""
Optimize this Etsy listing for search.

Current title: "{listing_title}"
{description}
1. Read `etsy://guides/seo`.
2. Search for the main keywords with `search_listings` and note which words
   top-ranking competitors use.
3. Propose:
   - A new title (max 140 characters) with the strongest keywords first
   - 13 tags (multi-word phrases, max 20 characters each)
   - A rewritten first paragraph for the description
4. Explain each change in one sentence.
"""

    @mcp.prompt
    def shop_improvement(shop_id: int) -> str:
        """Review a whole shop and suggest improvements."""
        return f"""
Review Etsy shop {shop_id} and suggest improvements.

1. Call `get_shop(shop_id={shop_id})` for title, announcement and policies.
2. Call `get_shop_sections(shop_id={shop_id})` and
   `get_shop_listings(shop_id={shop_id}, limit=100)` for the catalog.
3. Assess:
   - Shop title and announcement (clear, keyword-rich, up to date?)
   - Section structure (does every listing have a fitting section?)
   - Listing titles and tags (see `etsy://guides/seo`)
   - Price consistency across similar items
4. Output a prioritized list of at most 10 concrete changes. For changes
   that a tool can make (`update_shop`, `update_listing`,
   `create_shop_section`), name the tool and the arguments.
"""
