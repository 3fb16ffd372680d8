"""Value types shared by the reader, the macro expander and the evaluator."""
