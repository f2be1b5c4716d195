"""
Soloman - a compiler for a tiny language of ``print <expr>;`` statements.

Modules:
- lexer: pulls tokens from the source text
- parser: recursive descent parser producing the AST in ``nodes``
- lax_parser: textual-split parser kept for early demonstration sources
- compyler: LLVM IR backend built on llvmlite
- asmgen: x86-64 NASM backend
- finisher: writes artifacts and drives clang, nasm and ld

Usage:
    python -m soloman program.slm
    python -m soloman program.slm --backend asm --link
"""

__version__ = "0.1.0"
