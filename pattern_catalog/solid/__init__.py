"""SOLID principle examples, each with a problem and a solution variant."""
