import os
import subprocess

from .errors import ExternalToolFailure


def make_temp_output(text, path):
    print(f"Saving output to {path}")
    try:
        with open(path, "w") as f:
            f.write(text)
    except OSError as e:
        raise ExternalToolFailure(f'Cannot write {path}: {e}') from e


def run_tool(args):
    try:
        result = subprocess.run(args, capture_output=True, text=True)
    except FileNotFoundError as e:
        raise ExternalToolFailure(f'{args[0]} not found') from e
    if result.returncode != 0:
        raise ExternalToolFailure(f'{" ".join(args)} failed: {result.stderr.strip()}')


def convert_ir_to_exe(ir_path, output):
    print("Converting LLVM IR to an executable")
    run_tool(["clang", ir_path, "-o", output])


def convert_asm_to_exe(asm_path, output):
    print("Assembling and linking")
    obj_path = os.path.splitext(asm_path)[0] + ".o"
    run_tool(["nasm", "-felf64", asm_path, "-o", obj_path])
    run_tool(["ld", obj_path, "-o", output])
