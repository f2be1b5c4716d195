import unittest
from unittest import mock

from soloman.codegen import BACKENDS
from soloman.compyler import LLVMCodeGen
from soloman.nodes import BinOp, Num, Print, Program
from soloman.parser import parse


def lower(code):
    return LLVMCodeGen().lower_program(parse(code))


class LLVMCodeGenTests(unittest.TestCase):
    def test_registered(self):
        self.assertIs(BACKENDS['llvm'], LLVMCodeGen)
        self.assertEqual(LLVMCodeGen.artifact, "out.ll")

    def test_module_layout(self):
        text = lower("print 1;")
        self.assertIn('; ModuleID = "soloman"', text)
        self.assertIn('declare i32 @"printf"', text)
        self.assertIn('define i32 @"main"()', text)
        self.assertIn('@"fmt" = internal constant [5 x i8]', text)
        self.assertIn('ret i32 0', text)

    def test_every_operator_is_an_instruction(self):
        text = lower("print 1+2; print 3-4; print 5*6; print 7/2;")
        self.assertIn("add i64 1, 2", text)
        self.assertIn("sub i64 3, 4", text)
        self.assertIn("mul i64 5, 6", text)
        self.assertIn("sdiv i64 7, 2", text)

    def test_nested_operands_use_previous_results(self):
        text = lower("print (1+2)*3;")
        self.assertIn('%"addtmp" = add i64 1, 2', text)
        self.assertIn('%"multmp" = mul i64 %"addtmp", 3', text)

    def test_one_printf_call_per_statement(self):
        text = lower("print 1; print 2; print 3;")
        self.assertEqual(text.count("call i32"), 3)
        self.assertIn("i64 3)", text)

    def test_empty_program_only_returns(self):
        text = lower("")
        self.assertNotIn("call i32", text)
        self.assertIn("ret i32 0", text)

    def test_return_comes_last(self):
        text = lower("print 1; print 2;")
        self.assertGreater(text.index("ret i32 0"), text.rindex("call i32"))

    def test_output_is_deterministic(self):
        program = Program((Print(BinOp(Num(2), '+', BinOp(Num(3), '*', Num(4)))),))
        self.assertEqual(LLVMCodeGen().lower_program(program),
                         LLVMCodeGen().lower_program(program))

    def test_generator_can_be_reused(self):
        codegen = LLVMCodeGen()
        first = codegen.lower_program(parse("print 1+1;"))
        self.assertEqual(codegen.lower_program(parse("print 1+1;")), first)

    def test_long_flat_chain(self):
        text = lower("print " + "+".join(["1"] * 2500) + ";")
        self.assertEqual(text.count(" = add i64 "), 2499)
        self.assertIn('%"addtmp" = add i64 1, 1', text)
        self.assertIn('%"addtmp.1" = add i64 %"addtmp", 1', text)

    def test_operands_keep_evaluation_order(self):
        text = lower("print 2-3*4-5;")
        mul = text.index('%"multmp" = mul i64 3, 4')
        first_sub = text.index('%"subtmp" = sub i64 2, %"multmp"')
        second_sub = text.index('%"subtmp.1" = sub i64 %"subtmp", 5')
        self.assertLess(mul, first_sub)
        self.assertLess(first_sub, second_sub)

    def test_finish_invokes_clang(self):
        codegen = LLVMCodeGen()
        with mock.patch("soloman.compyler.convert_ir_to_exe") as convert:
            codegen.finish("prog")
        convert.assert_called_once_with("out.ll", "prog")
        self.assertFalse(LLVMCodeGen.linkable)
        self.assertEqual(codegen.success_message(), "Soloman compiled successfully.")


if __name__ == "__main__":
    unittest.main()
