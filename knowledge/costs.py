# =============================================================================
# knowledge/costs.py  —  SIP-012 Operation Cost Estimator
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Gives a rough, table-driven estimate of what a Clarity operation costs
#   under the SIP-012 cost functions, and how much of one block's budget
#   that uses.  Nothing is read from disk or the network.
#
# FIVE DIMENSIONS:
#   A Stacks block limits five things at once: runtime units, number of
#   database reads, number of writes, bytes read, bytes written.  Every
#   estimate fills in all five; unused dimensions stay at 0.
#
# THE NUMBERS ARE REPRESENTATIVE:
#   The unit costs below are simplified values for planning, not the exact
#   cost functions a node evaluates.  Treat the output as an order of
#   magnitude, then measure with `::get_costs` in the Clarinet console.
# =============================================================================

import math
from dataclasses import dataclass

OPERATIONS = (
    "map-read",
    "map-write",
    "list-append",
    "list-filter",
    "string-concat",
    "arithmetic",
    "contract-call",
    "token-transfer",
    "batch-operation",
)

# Runtime units per primitive.
RUNTIME_COSTS = {
    "map_get": 64,
    "map_set": 64,
    "map_delete": 64,
    "list_append": 32,
    "list_filter": 64,
    "string_concat": 32,
    "arithmetic": 1,
    "contract_call": 1000,
    "token_transfer": 50000,
}

# Per-block limits after SIP-012.
BLOCK_LIMITS = {
    "runtime": 5_000_000_000,
    "read_count": 15_000,
    "read_length": 100_000_000,
    "write_count": 15_000,
    "write_length": 15_000_000,
}

# Bytes per map entry key/value, used for read and write lengths.
MAP_ENTRY_BYTES = 40

# Utilization (percent of a block) above which a dimension is flagged.
HIGH_USAGE_PERCENT = 50
SUGGEST_PERCENT = 25


@dataclass(frozen=True)
class OperationCost:
    """Estimated resource use of one operation, in block-limit units."""

    runtime: int = 0
    read_count: int = 0
    write_count: int = 0
    read_length: int = 0
    write_length: int = 0

    def utilization(self) -> dict[str, float]:
        """Percent of each block limit this cost uses."""
        return {name: getattr(self, name) / limit * 100 for name, limit in BLOCK_LIMITS.items()}


def estimate_operation_cost(operation: str, data_size: int, iterations: int = 1) -> OperationCost:
    """Estimate the SIP-012 cost of running an operation `iterations` times.

    Args:
        operation: One of OPERATIONS.
        data_size: Size of the data processed (list length, string length,
            or entry size, depending on the operation).
        iterations: How many times the operation runs.

    Raises:
        ValueError: for an unknown operation, a negative data_size, or
            fewer than one iteration.
    """
    if operation not in OPERATIONS:
        raise ValueError(f"Unknown operation: {operation!r} (expected one of {', '.join(OPERATIONS)})")
    if data_size < 0:
        raise ValueError("data_size must not be negative")
    if iterations < 1:
        raise ValueError("iterations must be at least 1")

    if operation == "map-read":
        return OperationCost(
            runtime=RUNTIME_COSTS["map_get"] * iterations,
            read_count=iterations,
            read_length=data_size * MAP_ENTRY_BYTES * iterations,
        )
    if operation == "map-write":
        return OperationCost(
            runtime=RUNTIME_COSTS["map_set"] * iterations,
            write_count=iterations,
            write_length=data_size * MAP_ENTRY_BYTES * iterations,
        )
    if operation == "list-append":
        # Appending is logarithmic in the list length; a list of 0 or 1
        # items costs the same as one step.
        steps = math.log2(data_size) if data_size > 1 else 1.0
        return OperationCost(
            runtime=round(RUNTIME_COSTS["list_append"] * iterations * steps),
            write_count=iterations,
            write_length=data_size * 8 * iterations,
        )
    if operation == "list-filter":
        return OperationCost(runtime=RUNTIME_COSTS["list_filter"] * max(data_size, 1) * iterations)
    if operation == "string-concat":
        return OperationCost(runtime=RUNTIME_COSTS["string_concat"] * max(data_size, 1) * iterations)
    if operation == "arithmetic":
        return OperationCost(runtime=RUNTIME_COSTS["arithmetic"] * iterations)
    if operation == "contract-call":
        return OperationCost(runtime=RUNTIME_COSTS["contract_call"] * iterations)
    if operation == "token-transfer":
        return OperationCost(
            runtime=RUNTIME_COSTS["token_transfer"] * iterations,
            read_count=iterations,
            write_count=2 * iterations,
            read_length=40 * iterations,
            write_length=80 * iterations,
        )

    # batch-operation: bigger batches amortize more, up to 80%.
    efficiency = min(0.8, math.log10(iterations) / 2)
    return OperationCost(
        runtime=round(RUNTIME_COSTS["map_set"] * iterations * (1 - efficiency)),
        read_count=math.ceil(iterations / 2),
        write_count=iterations,
        write_length=data_size * iterations,
    )


def optimization_suggestions(operation: str, utilization: dict[str, float]) -> list[str]:
    suggestions = []
    if utilization["runtime"] > SUGGEST_PERCENT:
        suggestions.append("**Runtime Optimization**: Consider algorithm improvements or caching")
    if utilization["read_count"] > SUGGEST_PERCENT:
        suggestions.append("**Database Optimization**: Implement data consolidation or batching")
    if utilization["write_count"] > SUGGEST_PERCENT:
        suggestions.append("**Storage Optimization**: Use tuple-based storage or reduce write frequency")

    per_operation = {
        "list-append": "**List Optimization**: Consider using dynamic lists (SIP-012 benefit)",
        "map-write": "**Map Optimization**: Batch multiple updates into single operation",
        "token-transfer": "**Transfer Optimization**: Use batch transfer functions for multiple recipients",
    }
    if operation in per_operation:
        suggestions.append(per_operation[operation])
    return suggestions


def recommended_batch_size(cost: OperationCost) -> str:
    if cost.runtime < 1_000:
        return "50-100 operations"
    if cost.runtime < 10_000:
        return "25-50 operations"
    if cost.runtime < 50_000:
        return "10-25 operations"
    return "5-10 operations"


def _usage_line(percent: float, warning: str, ok: str) -> str:
    return f"⚠️ {warning}" if percent > HIGH_USAGE_PERCENT else f"✅ {ok}"


def format_cost_estimate(operation: str, data_size: int, iterations: int = 1) -> str:
    """The estimate_operation_cost answer as a markdown report."""
    cost = estimate_operation_cost(operation, data_size, iterations)
    usage = cost.utilization()

    suggestions = optimization_suggestions(operation, usage)
    suggestion_text = "\n".join(f"- {s}" for s in suggestions) or "- No specific optimizations needed"

    if iterations > 1:
        gain = "High" if iterations > 10 else "Medium" if iterations > 5 else "Low"
        batch_text = (
            f"**Single Operation Cost**: {round(cost.runtime / iterations):,} runtime units\n"
            f"**Batch Efficiency**: {gain} efficiency gain\n"
            f"**Recommended Batch Size**: {recommended_batch_size(cost)}"
        )
    else:
        batch_text = "Single operation - consider batching for multiple operations"

    limits = BLOCK_LIMITS
    return f"""# Operation Cost Estimation

## Operation Details
- **Type**: {operation}
- **Data Size**: {data_size:,}
- **Iterations**: {iterations}

## Estimated Costs (SIP-012)

### Resource Consumption
```
Runtime Cost: {cost.runtime:,} units
Read Count: {cost.read_count} operations
Write Count: {cost.write_count} operations
Read Length: {cost.read_length:,} bytes
Write Length: {cost.write_length:,} bytes
```

### Block Utilization
- **Runtime**: {usage['runtime']:.4f}% ({cost.runtime:,}/{limits['runtime']:,})
- **Read Count**: {usage['read_count']:.4f}% ({cost.read_count}/{limits['read_count']})
- **Write Count**: {usage['write_count']:.4f}% ({cost.write_count}/{limits['write_count']})
- **Read Length**: {usage['read_length']:.4f}% ({cost.read_length:,}/{limits['read_length']:,})
- **Write Length**: {usage['write_length']:.4f}% ({cost.write_length:,}/{limits['write_length']:,})

### Performance Analysis
{_usage_line(usage['runtime'], '**High Runtime Usage**: Consider optimization', '**Runtime**: Within reasonable bounds')}
{_usage_line(usage['read_count'], '**High Read Count**: Consider batching or caching', '**Read Count**: Efficient database usage')}
{_usage_line(usage['write_count'], '**High Write Count**: Consider data structure optimization', '**Write Count**: Efficient storage usage')}

## Optimization Suggestions
{suggestion_text}

## Batch Operation Analysis
{batch_text}

These figures use simplified SIP-012 unit costs; confirm with `::get_costs` in the Clarinet console."""
