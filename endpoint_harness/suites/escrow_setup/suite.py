"""Checks verifying that the payment gateway and escrow API are set up."""

from endpoint_harness.checks import endpoints_accessible, expect_response, judge_fields
from endpoint_harness.harness import CheckContext, CheckExecutor, VerificationHarness
from endpoint_harness.models.result import Outcome
from endpoint_harness.suites.escrow_setup.config import EscrowSetupConfig

KEY_IS_SET = "Set"


def gateway_config_check(path: str) -> CheckExecutor:
    """Both gateway keys must be reported as set by the config endpoint."""

    async def executor(context: CheckContext) -> Outcome:
        response = await context.get(path)
        if not response.ok:
            return Outcome(
                passed=False,
                detail=f"config endpoint answered {response.status}",
                status_code=response.status,
            )

        payload = response.json()
        mismatches = judge_fields(
            payload, {"config.keyId": KEY_IS_SET, "config.keySecret": KEY_IS_SET}
        )
        if mismatches:
            return Outcome(
                passed=False,
                detail=f"gateway keys missing: {', '.join(mismatches)}",
                status_code=response.status,
            )

        config = payload["config"]
        return Outcome(
            passed=True,
            detail=(
                f"gateway keys set (key type: {config.get('keyType', 'unknown')}, "
                f"environment: {config.get('nodeEnv', 'unknown')})"
            ),
            status_code=response.status,
        )

    return executor


def order_creation_check(path: str) -> CheckExecutor:
    """The test-order endpoint must report a successfully created order."""

    async def executor(context: CheckContext) -> Outcome:
        response = await context.post(path)
        if not response.ok:
            return Outcome(
                passed=False,
                detail=f"order endpoint answered {response.status}",
                status_code=response.status,
            )

        payload = response.json()
        if not isinstance(payload, dict) or payload.get("status") != "success":
            status = payload.get("status") if isinstance(payload, dict) else None
            return Outcome(
                passed=False,
                detail=f"test order was not created (status={status!r})",
                status_code=response.status,
            )

        order = payload.get("order")
        if not isinstance(order, dict):
            order = {}
        return Outcome(
            passed=True,
            detail=(
                f"test order {order.get('id', '?')} created "
                f"({order.get('amount', '?')} paise)"
            ),
            status_code=response.status,
        )

    return executor


def register_escrow_setup_checks(
    harness: VerificationHarness, config: EscrowSetupConfig
) -> None:
    """Register config, order-creation, db and endpoints checks, in that order."""
    harness.register_check("config", gateway_config_check(config.config_path))
    harness.register_check("order-creation", order_creation_check(config.order_path))
    # Browsing projects reads from the database, a 2xx proves the connection.
    harness.register_check(
        "db",
        expect_response(config.browse_path, "POST", strictness="success", json={}),
    )
    harness.register_check(
        "endpoints", endpoints_accessible(config.endpoints, "POST", json={})
    )
