"""Tree-walking evaluator for the Lox language.

The interpreter executes statements and evaluates expressions directly
from the AST. The active scope is passed explicitly to every `execute`
and `evaluate` call, so entering a block is just a call with a child
`Environment` and leaving it, by any path, needs no cleanup.

`return` is modelled as a value: executing a `Return` statement yields a
`ReturnSignal`, every statement that runs nested statements hands such a
signal straight back to its caller, and `LoxFunction.call` unwraps it.
"""

from __future__ import annotations

import math
import sys
import time
from typing import Any, List, Optional, TextIO

from .ast import (
    Expr, Literal, Grouping, Unary, Binary, Logical, Variable, Assign, Call,
    Stmt, Expression, Print, Var, Block, If, While, Function, Return,
)
from .callables import LoxCallable, LoxFunction, NativeFunction
from .environment import Environment
from .errors import LoxRuntimeError, ReturnSignal
from .printer import print_expr
from .tokens import Token, TokenType
from .values import to_string


class Interpreter:
    """Core interpreter that executes Lox AST."""
    def __init__(self, debug_level: int = 0, debug_file: str = 'debug.txt',
                 stdout: Optional[TextIO] = None):
        self.global_env = Environment()
        self.debug_level = debug_level
        self.debug_file = debug_file
        self.debug_fp: Optional[TextIO] = None
        self.stdout = stdout
        # Paren tokens of the calls currently executing, innermost last
        self.call_stack: List[Token] = []
        self.load_standard_module()

    def debug(self, msg: str) -> None:
        if self.debug_level > 0:
            if self.debug_fp is None:
                self.debug_fp = open(self.debug_file, 'w', encoding='utf-8')
            self.debug_fp.write(msg + '\n')
            self.debug_fp.flush()

    def close(self) -> None:
        if self.debug_fp is not None:
            self.debug_fp.close()
            self.debug_fp = None

    def load_standard_module(self) -> None:
        def std_clock(args: List[Any]) -> Any:
            return time.time()

        self.global_env.define('clock', NativeFunction('clock', 0, std_clock))

    # Public API
    def run(self, statements: List[Stmt]) -> None:
        """Execute a program against the global scope.

        Raises `LoxRuntimeError` on the first runtime error.
        """
        if self.debug_level >= 1:
            self.debug(f"run: {len(statements)} statement(s)")
        try:
            for stmt in statements:
                self.execute(stmt, self.global_env)
        except RecursionError:
            if not self.call_stack:
                raise
            token = self.call_stack[-1]
            self.call_stack.clear()
            raise LoxRuntimeError(token, "Stack overflow.") from None
        except LoxRuntimeError as e:
            self.call_stack.clear()
            if self.debug_level >= 1:
                self.debug(f"runtime error at line {e.token.line}: {e.message}")
            raise
        if self.debug_level >= 1:
            self.debug("run: finished")

    def execute_block(self, statements: List[Stmt], env: Environment) -> Optional[ReturnSignal]:
        for stmt in statements:
            result = self.execute(stmt, env)
            if isinstance(result, ReturnSignal):
                return result
        return None

    def execute(self, node: Stmt, env: Environment) -> Optional[ReturnSignal]:
        if isinstance(node, Expression):
            self.evaluate(node.expression, env)
            return None
        if isinstance(node, Print):
            value = self.evaluate(node.expression, env)
            print(to_string(value), file=self.stdout if self.stdout is not None else sys.stdout)
            return None
        if isinstance(node, Var):
            value = self.evaluate(node.initializer, env) if node.initializer is not None else None
            env.define(node.name.lexeme, value)
            if self.debug_level >= 2:
                self.debug(f"declare {node.name.lexeme} = {to_string(value)}")
            return None
        if isinstance(node, Block):
            return self.execute_block(node.statements, Environment(parent=env))
        if isinstance(node, If):
            cond = self.evaluate(node.condition, env)
            truthy = self.is_truthy(cond)
            if self.debug_level >= 3:
                self.debug(f"if {print_expr(node.condition)} -> {to_string(truthy)}")
            if truthy:
                return self.execute(node.then_branch, env)
            if node.else_branch is not None:
                return self.execute(node.else_branch, env)
            return None
        if isinstance(node, While):
            while self.is_truthy(self.evaluate(node.condition, env)):
                if self.debug_level >= 3:
                    self.debug(f"while {print_expr(node.condition)}")
                res = self.execute(node.body, env)
                if isinstance(res, ReturnSignal):
                    return res
            return None
        if isinstance(node, Function):
            # Capture the scope active at declaration, not at call time
            env.define(node.name.lexeme, LoxFunction(node, env))
            if self.debug_level >= 2:
                self.debug(f"define function {node.name.lexeme}/{len(node.params)}")
            return None
        if isinstance(node, Return):
            value = self.evaluate(node.value, env) if node.value is not None else None
            return ReturnSignal(value)
        raise NotImplementedError(f"execute: unexpected node type {type(node).__name__}")

    def evaluate(self, node: Expr, env: Environment) -> Any:
        if isinstance(node, Literal):
            return node.value
        if isinstance(node, Grouping):
            return self.evaluate(node.expression, env)
        if isinstance(node, Variable):
            return env.get(node.name)
        if isinstance(node, Assign):
            value = self.evaluate(node.value, env)
            env.assign(node.name, value)
            return value
        if isinstance(node, Logical):
            left = self.evaluate(node.left, env)
            if node.operator.type is TokenType.OR:
                if self.is_truthy(left):
                    return left
            elif not self.is_truthy(left):
                return left
            return self.evaluate(node.right, env)
        if isinstance(node, Unary):
            right = self.evaluate(node.right, env)
            if node.operator.type is TokenType.BANG:
                return not self.is_truthy(right)
            if node.operator.type is TokenType.MINUS:
                self.check_number_operand(node.operator, right)
                return -right
            raise LoxRuntimeError(node.operator, f"Unknown unary operator '{node.operator.lexeme}'.")
        if isinstance(node, Binary):
            left = self.evaluate(node.left, env)
            right = self.evaluate(node.right, env)
            return self.apply_binary_op(node.operator, left, right)
        if isinstance(node, Call):
            callee = self.evaluate(node.callee, env)
            args = [self.evaluate(arg, env) for arg in node.arguments]
            return self.call_function(callee, args, node.paren)
        raise NotImplementedError(f"evaluate: unexpected node type {type(node).__name__}")

    def call_function(self, func: Any, args: List[Any], paren: Token) -> Any:
        if not isinstance(func, LoxCallable):
            raise LoxRuntimeError(paren, "Can only call functions and classes.")
        if len(args) != func.arity():
            raise LoxRuntimeError(paren, f"Expected {func.arity()} arguments but got {len(args)}.")
        if self.debug_level >= 3:
            self.debug(f"call {func!r} with {len(args)} argument(s) at line {paren.line}")
        self.call_stack.append(paren)
        result = func.call(self, args)
        self.call_stack.pop()
        return result

    def is_truthy(self, value: Any) -> bool:
        if value is None:
            return False
        if isinstance(value, bool):
            return value
        return True

    def is_equal(self, a: Any, b: Any) -> bool:
        if a is None and b is None:
            return True
        if a is None or b is None:
            return False
        # Values of different dynamic types are never equal, so true != 1
        if type(a) is not type(b):
            return False
        return a == b

    def apply_binary_op(self, operator: Token, a: Any, b: Any) -> Any:
        op = operator.type
        if op is TokenType.EQUAL_EQUAL:
            return self.is_equal(a, b)
        if op is TokenType.BANG_EQUAL:
            return not self.is_equal(a, b)
        if op is TokenType.PLUS:
            if self.is_number(a) and self.is_number(b):
                return a + b
            if isinstance(a, str) and isinstance(b, str):
                return a + b
            raise LoxRuntimeError(operator, "Operands must be two numbers or two strings.")
        self.check_number_operands(operator, a, b)
        if op is TokenType.MINUS:
            return a - b
        if op is TokenType.STAR:
            return a * b
        if op is TokenType.SLASH:
            return self.divide(a, b)
        if op is TokenType.GREATER:
            return a > b
        if op is TokenType.GREATER_EQUAL:
            return a >= b
        if op is TokenType.LESS:
            return a < b
        if op is TokenType.LESS_EQUAL:
            return a <= b
        raise LoxRuntimeError(operator, f"Unknown operator '{operator.lexeme}'.")

    def divide(self, a: float, b: float) -> float:
        # IEEE-754 semantics instead of ZeroDivisionError
        if b == 0.0:
            if a == 0.0 or math.isnan(a):
                return math.nan
            return math.copysign(math.inf, a) * math.copysign(1.0, b)
        return a / b

    def is_number(self, value: Any) -> bool:
        return isinstance(value, float)

    def check_number_operand(self, operator: Token, operand: Any) -> None:
        if self.is_number(operand):
            return
        raise LoxRuntimeError(operator, "Operand must be a number.")

    def check_number_operands(self, operator: Token, left: Any, right: Any) -> None:
        if self.is_number(left) and self.is_number(right):
            return
        raise LoxRuntimeError(operator, "Operands must be numbers.")
