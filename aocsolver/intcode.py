"""A virtual machine for IntCode programs."""

from __future__ import annotations

from typing import Iterable


class IntCodeError(RuntimeError):
    """Raised when a program cannot be executed."""


class IntCodeComputer:
    """Runs an IntCode program held in memory that grows as it is written to."""

    def __init__(self, program: Iterable[int]) -> None:
        self._mem = list(program)
        self._pc = 0
        self._rel = 0
        self._halted = False

    @property
    def halted(self) -> bool:
        return self._halted

    @property
    def memory(self) -> list[int]:
        """A copy of the current memory contents."""
        return list(self._mem)

    def read(self, addr: int) -> int:
        """Return the value at `addr`; memory never written reads as zero."""
        if 0 <= addr < len(self._mem):
            return self._mem[addr]
        return 0

    def write(self, addr: int, value: int) -> None:
        """Store `value` at `addr`, growing memory to fit it."""
        if addr < 0:
            raise IntCodeError(f"cannot write to negative address {addr}")
        if addr >= len(self._mem):
            self._mem.extend([0] * (addr + 1 - len(self._mem)))
        self._mem[addr] = value

    def run_with_input_until_halt(self, inputs: Iterable[int]) -> list[int]:
        """Run until the program halts or asks for input when `inputs` is used up."""
        remaining = iter(inputs)
        out: list[int] = []
        while not self._halted:
            if self._instruction() == 3:
                try:
                    value = next(remaining)
                except StopIteration:
                    return out
                output = self._step(value)
            else:
                output = self._step(None)
            if output is not None:
                out.append(output)
        return out

    def run_until_halt(self, inputs: Iterable[int]) -> list[int]:
        """Run until the program halts, returning everything it output."""
        remaining = iter(inputs)
        out: list[int] = []
        while not self._halted:
            value = next(remaining, None) if self._instruction() % 100 == 3 else None
            output = self._step(value)
            if output is not None:
                out.append(output)
        return out

    def _instruction(self) -> int:
        if not 0 <= self._pc < len(self._mem):
            raise IntCodeError(f"program counter {self._pc} is outside memory")
        instruction = self._mem[self._pc]
        if instruction < 0:
            raise IntCodeError(f"Invalid instruction '{instruction}' encountered")
        return instruction

    def _param(self, position: int) -> tuple[int, int]:
        """Return the raw value of a parameter and its mode."""
        mode = self._instruction() // (10 ** (position + 1)) % 10
        return self.read(self._pc + position), mode

    def _param_addr(self, position: int) -> int:
        raw, mode = self._param(position)
        if mode == 0:
            return raw
        if mode == 1:
            return self._pc + position
        if mode == 2:
            return self._rel + raw
        raise IntCodeError(f"invalid parameter mode {mode}")

    def _param_value(self, position: int) -> int:
        return self.read(self._param_addr(position))

    def _step(self, value: int | None) -> int | None:
        instruction = self._instruction()
        op = instruction % 100

        if op in (1, 2, 7, 8):
            p1 = self._param_value(1)
            p2 = self._param_value(2)
            target = self._param_addr(3)
            if op == 1:
                self.write(target, p1 + p2)
            elif op == 2:
                self.write(target, p1 * p2)
            elif op == 7:
                self.write(target, int(p1 < p2))
            else:
                self.write(target, int(p1 == p2))
            self._pc += 4
        elif op == 3:
            if value is None:
                raise IntCodeError("must have an input to run this instruction")
            self.write(self._param_addr(1), value)
            self._pc += 2
        elif op == 4:
            p1 = self._param_value(1)
            self._pc += 2
            return p1
        elif op in (5, 6):
            p1 = self._param_value(1)
            target = self._param_value(2)
            if (op == 5 and p1 != 0) or (op == 6 and p1 == 0):
                if not 0 <= target < len(self._mem):
                    raise IntCodeError(f"jump target {target} is outside memory")
                self._pc = target
            else:
                self._pc += 3
        elif op == 9:
            self._rel += self._param_value(1)
            self._pc += 2
        elif op == 99:
            self._halted = True
        else:
            raise IntCodeError(f"Invalid instruction '{instruction}' encountered")
        return None


def run_program(program: Iterable[int], inputs: Iterable[int]) -> list[int]:
    """Run a fresh copy of `program` to completion and return its output."""
    return IntCodeComputer(program).run_until_halt(inputs)