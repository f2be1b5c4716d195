"""
x86-64 Linux backend emitting NASM source.

Expressions are evaluated with a stack discipline: ``rax`` holds the value of
the subtree just lowered, the left operand of a binary node is pushed while
the right one is computed and popped back into ``rbx``. The program talks to
the kernel directly through ``write`` and ``exit`` syscalls, so the output
links without libc.
"""

from .codegen import CodeGen, register
from .finisher import convert_asm_to_exe
from .nodes import BinOp, Num, Print

BUFFER_SIZE = 32

SYS_WRITE = 1
SYS_EXIT = 60
STDOUT = 1

PRINT_INT = [
    "print_int:",
    "    mov rax, rdi",
    f"    lea rsi, [rel buffer + {BUFFER_SIZE}]",
    "    xor r9, r9",
    "    test rax, rax",
    "    jns .digits",
    "    mov r9, 1",
    "    neg rax",
    ".digits:",
    "    mov rcx, 10",
    ".next_digit:",
    "    xor rdx, rdx",
    "    div rcx",
    "    add dl, '0'",
    "    dec rsi",
    "    mov [rsi], dl",
    "    test rax, rax",
    "    jnz .next_digit",
    "    test r9, r9",
    "    jz .write",
    "    dec rsi",
    "    mov byte [rsi], '-'",
    ".write:",
    f"    mov rax, {SYS_WRITE}",
    f"    mov rdi, {STDOUT}",
    f"    lea rdx, [rel buffer + {BUFFER_SIZE}]",
    "    sub rdx, rsi",
    "    syscall",
    f"    mov rax, {SYS_WRITE}",
    f"    mov rdi, {STDOUT}",
    "    lea rsi, [rel newline]",
    "    mov rdx, 1",
    "    syscall",
    "    ret",
]

PREAMBLE = [
    "section .text",
    "global _start",
    "",
    *PRINT_INT,
    "",
    "_start:",
]

EPILOGUE = [
    f"    mov rax, {SYS_EXIT}",
    "    xor rdi, rdi",
    "    syscall",
]

DATA = [
    "",
    "section .data",
    "newline: db 10",
    "",
    "section .bss",
    f"buffer: resb {BUFFER_SIZE}",
]

# operator -> instructions run once the left operand is in rbx and the
# right operand in rax; each leaves the result in rax
COMBINE = {
    '+': ["add rax, rbx"],
    '-': ["sub rbx, rax", "mov rax, rbx"],
    '*': ["imul rax, rbx"],
    '/': ["mov rcx, rax", "mov rax, rbx", "cqo", "idiv rcx"],
}


@register('asm')
class AsmCodeGen(CodeGen):
    artifact = "out.asm"
    linkable = True

    def __init__(self):
        self.lines = []

    def emit(self, line):
        self.lines.append(f"    {line}")

    def generate_expr(self, expr):
        # explicit work stack: nodes still to lower, and tuples of
        # instructions to emit once everything above them has been lowered
        work = [expr]
        while work:
            item = work.pop()
            if isinstance(item, Num):
                self.emit(f"mov rax, {item.value}")
            elif isinstance(item, BinOp):
                if item.op not in COMBINE:
                    raise ValueError(f'Unknown operator: {item.op}')
                work.append(("pop rbx", *COMBINE[item.op]))
                work.append(item.right)
                work.append(("push rax",))
                work.append(item.left)
            elif isinstance(item, tuple):
                for line in item:
                    self.emit(line)
            else:
                raise TypeError(f'Cannot lower {type(item).__name__}')

    def generate_code(self, node):
        if isinstance(node, Print):
            self.generate_expr(node.expr)
            self.emit("mov rdi, rax")
            self.emit("call print_int")
        else:
            raise TypeError(f'Cannot lower {type(node).__name__}')

    def lower_program(self, program):
        print("Generating assembly")
        self.lines = list(PREAMBLE)
        for stmt in program.statements:
            self.generate_code(stmt)
        self.lines.extend(EPILOGUE)
        self.lines.extend(DATA)
        return "\n".join(self.lines) + "\n"

    def finish(self, output, link=False):
        if link:
            convert_asm_to_exe(self.artifact, output)

    def success_message(self):
        return f"Assembly written to {self.artifact}"
