"""Labor Calc MCP Server - FastMCP implementation for benefit calculation tools."""

import logging
from typing import Any

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from laborcalc.sdk import calculate, get_registry

logger = logging.getLogger(__name__)

# Initialize FastMCP server
mcp = FastMCP("labor-calc")


# --- Tools ---

@mcp.tool()
async def calculate_benefit(
    benefit_type: str = Field(description="One of 'gratuity', 'overtime', 'leave'"),
    monthly_salary: str = Field(description="Monthly salary as a decimal string (e.g., '3000')"),
    jurisdiction: str | None = Field(default=None, description="Jurisdiction code (e.g., 'uae'); unknown codes use the default rules"),
    years_of_service: str | None = Field(default=None, description="Years of service, fractional allowed (gratuity, leave)"),
    months_of_service: str | None = Field(default=None, description="Additional months of service (gratuity, leave)"),
    separation_type: str | None = Field(default=None, description="'termination' or 'resignation' (gratuity)"),
    overtime_hours: str | None = Field(default=None, description="Overtime hours worked (overtime)"),
    overtime_type: str | None = Field(default=None, description="'normal', 'weekend' or 'holiday' (overtime)"),
    unused_leave_days: str | None = Field(default=None, description="Unused leave days to encash (leave)"),
) -> dict[str, Any]:
    """Calculate a statutory benefit. Returns the amount, currency and an itemized breakdown."""
    try:
        raw = {
            "monthly_salary": monthly_salary,
            "years_of_service": years_of_service,
            "months_of_service": months_of_service,
            "separation_type": separation_type,
            "overtime_hours": overtime_hours,
            "overtime_type": overtime_type,
            "unused_leave_days": unused_leave_days,
        }
        result = calculate(jurisdiction, benefit_type, raw)

        if not result.ok:
            return {"error": result.message, "field": result.field, "result": None}

        return {"result": result.model_dump(mode="json")}

    except Exception as e:
        logger.error(f"Error calculating {benefit_type}: {e}")
        return {"error": str(e), "result": None}


@mcp.tool()
async def list_jurisdictions(
    region: str | None = Field(default=None, description="Filter by region (e.g., 'gcc')"),
) -> dict[str, Any]:
    """List jurisdictions with rule data. Codes not listed fall back to the default rule set."""
    try:
        registry = get_registry()
        jurisdictions = [
            {
                "code": r.code,
                "name": r.name,
                "region": r.region,
                "aliases": list(r.aliases),
                "currency_code": r.currency_code,
            }
            for r in registry.list_rule_sets(region=region)
        ]
        return {
            "jurisdictions": jurisdictions,
            "count": len(jurisdictions),
            "default": registry.default.code,
        }
    except Exception as e:
        logger.error(f"Error listing jurisdictions: {e}")
        return {"error": str(e), "jurisdictions": [], "count": 0}


@mcp.tool()
async def get_rules(
    jurisdiction: str = Field(description="Jurisdiction code or alias"),
) -> dict[str, Any]:
    """Get the full rule set a jurisdiction code resolves to."""
    try:
        registry = get_registry()
        rule_set = registry.lookup(jurisdiction)
        return {
            "rules": rule_set.model_dump(mode="json"),
            "is_default": jurisdiction not in registry,
        }
    except Exception as e:
        logger.error(f"Error loading rules for {jurisdiction}: {e}")
        return {"error": str(e), "rules": None}


# --- Server Entry Point ---

def run_server():
    """Run the MCP server in stdio mode."""
    mcp.run(transport="stdio")


if __name__ == "__main__":
    run_server()
