"""
Seller reference documents served as MCP resources.

Guides are static markdown files next to this module; the operations
reference is rendered from the operation registry.
"""

from pathlib import Path

from fastmcp import FastMCP

from etsy_mcp.tools.registry import OperationRegistry

DOCUMENTS_DIR = Path(__file__).parent

GUIDES = {
    "etsy://guides/seo": ("seo_guide.md", "SEO Guide"),
    "etsy://guides/photography": ("photography_guide.md", "Photography Guide"),
    "etsy://policies/fees": ("fees.md", "Etsy Fees"),
    "etsy://reference/when-made": ("when_made.md", "Listing Attribute Values"),
}


def load_document(filename: str, title: str) -> str:
    """Read a bundled markdown document.

    Returns a short markdown note instead of raising if the file is missing
    or unreadable.
    """
    path = DOCUMENTS_DIR / filename
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return f"# {title}\n\nDocument not found."
    except (OSError, UnicodeDecodeError) as e:
        return f"# {title}\n\nError loading document: {e}"


def render_operations_reference(registry: OperationRegistry) -> str:
    """Markdown table of all operations with verb, path and auth requirement."""
    lines = [
        "# Etsy MCP Operations",
        "",
        "Write operations need an OAuth access token (ETSY_ACCESS_TOKEN).",
        "",
        "| Tool | Method | Path | Auth |",
        "|---|---|---|---|",
    ]
    for operation in registry:
        auth = "OAuth token" if operation.requires_auth else "API key"
        lines.append(
            f"| `{operation.name}` | {operation.method} | `{operation.path}` | {auth} |"
        )
    return "\n".join(lines) + "\n"


def register_seller_resources(mcp: FastMCP, registry: OperationRegistry) -> None:
    """Register seller reference resources on the given MCP server.

    Args:
        mcp: The FastMCP server instance to register resources on
        registry: Operation registry (for the operations reference)
    """

    @mcp.resource("etsy://guides/seo")
    def get_seo_guide() -> str:
        """How Etsy search ranks listings and how to write titles and tags for it."""
        return load_document(*GUIDES["etsy://guides/seo"])

    @mcp.resource("etsy://guides/photography")
    def get_photography_guide() -> str:
        """Product photography checklist (sizes, lighting, image order)."""
        return load_document(*GUIDES["etsy://guides/photography"])

    @mcp.resource("etsy://policies/fees")
    def get_fee_overview() -> str:
        """Listing, transaction and payment processing fees.

        READ THIS before calculating prices. The pricing_strategy prompt uses
        the same rates.
        """
        return load_document(*GUIDES["etsy://policies/fees"])

    @mcp.resource("etsy://reference/when-made")
    def get_listing_attribute_values() -> str:
        """Accepted values for who_made and when_made in create_listing."""
        return load_document(*GUIDES["etsy://reference/when-made"])

    @mcp.resource("etsy://reference/operations")
    def get_operations_reference() -> str:
        """All tools with their Etsy endpoint and whether they need OAuth."""
        return render_operations_reference(registry)
