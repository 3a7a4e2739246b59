# Internal solvers used during generation
