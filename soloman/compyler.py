import llvmlite.binding as llvm
import llvmlite.ir as ir

from .codegen import CodeGen, register
from .finisher import convert_ir_to_exe
from .nodes import BinOp, Num, Print

INT64 = ir.IntType(64)
INT32 = ir.IntType(32)
CHAR_PTR = ir.IntType(8).as_pointer()

FORMAT = "%ld\n\0"


@register('llvm')
class LLVMCodeGen(CodeGen):
    artifact = "out.ll"

    def __init__(self):
        self.module = None
        self.builder = None
        self.func = None
        self.printf = None
        self.fmt = None

    def generate_binop(self, op, left, right):
        if op == '+':
            return self.builder.add(left, right, name="addtmp")
        elif op == '-':
            return self.builder.sub(left, right, name="subtmp")
        elif op == '*':
            return self.builder.mul(left, right, name="multmp")
        elif op == '/':
            return self.builder.sdiv(left, right, name="divtmp")
        raise ValueError(f'Unknown operator: {op}')

    def generate_expr(self, expr):
        # post-order walk on an explicit stack; operator strings mark the
        # point where both operands of a BinOp are on the value stack
        values = []
        work = [expr]
        while work:
            item = work.pop()
            if isinstance(item, Num):
                values.append(ir.Constant(INT64, item.value))
            elif isinstance(item, BinOp):
                work.append(item.op)
                work.append(item.right)
                work.append(item.left)
            elif isinstance(item, str):
                right = values.pop()
                left = values.pop()
                values.append(self.generate_binop(item, left, right))
            else:
                raise TypeError(f'Cannot lower {type(item).__name__}')
        return values.pop()

    def generate_code(self, node):
        if isinstance(node, Print):
            value = self.generate_expr(node.expr)
            fmt_ptr = self.builder.bitcast(self.fmt, CHAR_PTR)
            return self.builder.call(self.printf, [fmt_ptr, value], name="printf")
        raise TypeError(f'Cannot lower {type(node).__name__}')

    def declare_runtime(self):
        printf_ty = ir.FunctionType(INT32, [CHAR_PTR], var_arg=True)
        self.printf = ir.Function(self.module, printf_ty, name="printf")

        c_fmt = ir.Constant(ir.ArrayType(ir.IntType(8), len(FORMAT)),
                            bytearray(FORMAT.encode("utf8")))
        self.fmt = ir.GlobalVariable(self.module, c_fmt.type, name="fmt")
        self.fmt.linkage = "internal"
        self.fmt.global_constant = True
        self.fmt.initializer = c_fmt

    def create_main(self, program):
        self.module = ir.Module(name="soloman")
        self.module.triple = llvm.get_default_triple()
        self.declare_runtime()

        func_type = ir.FunctionType(INT32, [])
        self.func = ir.Function(self.module, func_type, name="main")
        block = self.func.append_basic_block(name="entry")
        self.builder = ir.IRBuilder(block)
        for stmt in program.statements:
            self.generate_code(stmt)
        self.builder.ret(ir.Constant(INT32, 0))
        return self.module

    def lower_program(self, program):
        print("Generating LLVM IR")
        return str(self.create_main(program))

    def finish(self, output, link=False):
        convert_ir_to_exe(self.artifact, output)

    def success_message(self):
        return "Soloman compiled successfully."
