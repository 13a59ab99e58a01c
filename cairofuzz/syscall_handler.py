"""A Starknet syscall handler that answers with fixed, logged values."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from . import felt


@dataclass(frozen=True)
class U256:
    """A 256-bit value split in two 128-bit halves."""

    hi: int
    lo: int


@dataclass(frozen=True)
class BlockInfo:
    block_number: int
    block_timestamp: int
    sequencer_address: int


@dataclass(frozen=True)
class TxInfo:
    version: int
    account_contract_address: int
    max_fee: int
    signature: list[int]
    transaction_hash: int
    chain_id: int
    nonce: int


@dataclass(frozen=True)
class ExecutionInfo:
    block_info: BlockInfo
    tx_info: TxInfo
    caller_address: int
    contract_address: int
    entry_point_selector: int


@dataclass(frozen=True)
class ResourceBounds:
    resource: int
    max_amount: int
    max_price_per_unit: int


@dataclass(frozen=True)
class TxV2Info:
    version: int
    account_contract_address: int
    max_fee: int
    signature: list[int]
    transaction_hash: int
    chain_id: int
    nonce: int
    tip: int
    paymaster_data: list[int]
    nonce_data_availability_mode: int
    fee_data_availability_mode: int
    account_deployment_data: list[int]
    resource_bounds: list[ResourceBounds] = field(default_factory=list)


@dataclass(frozen=True)
class ExecutionInfoV2:
    block_info: BlockInfo
    tx_info: TxV2Info
    caller_address: int
    contract_address: int
    entry_point_selector: int


def _fixed_block_info() -> BlockInfo:
    return BlockInfo(block_number=1234, block_timestamp=2345, sequencer_address=3456)


class SyscallHandler:
    """Handles syscalls from executed contracts with deterministic answers."""

    def get_block_hash(self, block_number: int, gas: int) -> int:
        print(f"Called `get_block_hash({block_number})` from MLIR.")
        return felt.from_bytes_be(b"get_block_hash ok")

    def get_execution_info(self, gas: int) -> ExecutionInfo:
        print("Called `get_execution_info()` from MLIR.")
        return ExecutionInfo(
            block_info=_fixed_block_info(),
            tx_info=TxInfo(
                version=4567,
                account_contract_address=5678,
                max_fee=6789,
                signature=[1248, 2486],
                transaction_hash=9876,
                chain_id=8765,
                nonce=7654,
            ),
            caller_address=6543,
            contract_address=5432,
            entry_point_selector=4321,
        )

    def get_execution_info_v2(self, gas: int) -> ExecutionInfoV2:
        print("Called `get_execution_info_v2()` from MLIR.")
        return ExecutionInfoV2(
            block_info=_fixed_block_info(),
            tx_info=TxV2Info(
                version=1,
                account_contract_address=1,
                max_fee=0,
                signature=[1],
                transaction_hash=1,
                chain_id=1,
                nonce=1,
                tip=1,
                paymaster_data=[1],
                nonce_data_availability_mode=0,
                fee_data_availability_mode=0,
                account_deployment_data=[1],
                resource_bounds=[
                    ResourceBounds(resource=2, max_amount=10, max_price_per_unit=20)
                ],
            ),
            caller_address=6543,
            contract_address=5432,
            entry_point_selector=4321,
        )

    def deploy(
        self,
        class_hash: int,
        contract_address_salt: int,
        calldata: Sequence[int],
        deploy_from_zero: bool,
        gas: int,
    ) -> tuple[int, list[int]]:
        print(
            f"Called `deploy({class_hash}, {contract_address_salt}, "
            f"{list(calldata)}, {str(deploy_from_zero).lower()})` from MLIR."
        )
        return (
            felt.from_int(class_hash + contract_address_salt),
            [felt.from_int(x + 1) for x in calldata],
        )

    def replace_class(self, class_hash: int, gas: int) -> None:
        print(f"Called `replace_class({class_hash})` from MLIR.")

    def library_call(
        self,
        class_hash: int,
        function_selector: int,
        calldata: Sequence[int],
        gas: int,
    ) -> list[int]:
        print(
            f"Called `library_call({class_hash}, {function_selector}, "
            f"{list(calldata)})` from MLIR."
        )
        return [felt.from_int(x * 3) for x in calldata]

    def call_contract(
        self,
        address: int,
        entry_point_selector: int,
        calldata: Sequence[int],
        gas: int,
    ) -> list[int]:
        print(
            f"Called `call_contract({address}, {entry_point_selector}, "
            f"{list(calldata)})` from MLIR."
        )
        return [felt.from_int(x * 3) for x in calldata]

    def storage_read(self, address_domain: int, address: int, gas: int) -> int:
        print(f"Called `storage_read({address_domain}, {address})` from MLIR.")
        return felt.from_int(address * 3)

    def storage_write(
        self, address_domain: int, address: int, value: int, gas: int
    ) -> None:
        print(f"Called `storage_write({address_domain}, {address}, {value})` from MLIR.")

    def emit_event(self, keys: Sequence[int], data: Sequence[int], gas: int) -> None:
        print(f"Called `emit_event({list(keys)}, {list(data)})` from MLIR.")

    def send_message_to_l1(
        self, to_address: int, payload: Sequence[int], gas: int
    ) -> None:
        print(f"Called `send_message_to_l1({to_address}, {list(payload)})` from MLIR.")

    def keccak(self, input: Sequence[int], gas: int) -> U256:
        print(f"Called `keccak({list(input)})` from MLIR.")
        return U256(hi=0, lo=1234567890)