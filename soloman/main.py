import argparse
import sys

from . import asmgen, compyler  # noqa: F401  registers the backends
from .codegen import BACKENDS
from .errors import CompileError
from .finisher import make_temp_output
from .lax_parser import parse_lax
from .parser import parse
from .reader import fetch_code

DEFAULT_BACKEND = "llvm"
DEFAULT_OUTPUT = "out"


def build_parser():
    parser = argparse.ArgumentParser(
        prog="soloman",
        description="Compile a Soloman source file to a native executable",
    )
    parser.add_argument("file", nargs="?", help="Soloman source file")
    parser.add_argument("--backend", choices=sorted(BACKENDS), default=DEFAULT_BACKEND,
                        help=f"code generator to use (default: {DEFAULT_BACKEND})")
    parser.add_argument("-o", "--output",
                        help=f"executable name (default: {DEFAULT_OUTPUT}); "
                             "the asm backend only accepts it together with --link")
    parser.add_argument("--lax", action="store_true",
                        help="use the textual-split parser of the first Soloman release")
    parser.add_argument("--link", action="store_true",
                        help="assemble and link the output of the asm backend with nasm and ld")
    return parser


def check_options(parser, args):
    backend = BACKENDS[args.backend]
    if args.link and not backend.linkable:
        parser.error(f"--link is not supported by the {args.backend} backend")
    if backend.linkable and args.output is not None and not args.link:
        parser.error(f"-o/--output requires --link with the {args.backend} backend")


def compile_source(code, backend=DEFAULT_BACKEND, output=DEFAULT_OUTPUT, lax=False, link=False):
    """
    Run the whole pipeline on ``code`` and return the backend that produced
    the artifact.

    The program is fully lowered before anything is written, so a lexical or
    syntax error never leaves an output file behind.
    """
    program = parse_lax(code) if lax else parse(code)

    codegen = BACKENDS[backend]()
    text = codegen.lower_program(program)
    make_temp_output(text, codegen.artifact)
    codegen.finish(output, link)
    return codegen


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.file is None:
        parser.print_usage()
        return 0
    check_options(parser, args)

    try:
        code = fetch_code(args.file)
        codegen = compile_source(code, args.backend, args.output or DEFAULT_OUTPUT,
                                 args.lax, args.link)
    except (CompileError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(codegen.success_message())
    return 0
