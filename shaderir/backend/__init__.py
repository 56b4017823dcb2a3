"""LLVM IR helpers used by the shader backend passes."""
