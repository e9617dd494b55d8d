class gpu_scope:
    """Context manager to temporarily switch computations to GPU."""
    def __enter__(self):
        import SagLearn.core.backend.backend as backend
        self.prev_using = backend.USING

        if not backend.gpu_available():
            raise RuntimeError("GPU not available.")
        backend.use_gpu()
        return backend.xp

    def __exit__(self, exc_type, exc_value, tb):
        import SagLearn.core.backend.backend as backend
        if self.prev_using == "gpu":
            backend.xp.cuda.Device().synchronize()
        else:
            backend.use_cpu()


class cpu_scope:
    """Context manager to temporarily switch computations to CPU."""
    def __enter__(self):
        import SagLearn.core.backend.backend as backend
        self.prev_using = backend.USING
        backend.use_cpu()
        return backend.xp

    def __exit__(self, exc_type, exc_value, tb):
        import SagLearn.core.backend.backend as backend
        if self.prev_using == "gpu":
            backend.use_gpu()


class precision_scope:
    """
    Temporarily change the default floating-point precision (dtype) inside a `with` block.

    Weight stores created inside the block allocate their matrix with this dtype;
    the drift band of scaled weight vectors is derived from it.

    Args:
        dtype (str or dtype): Precision to use ("float32", "float64", xp.float32, etc.)
    """
    def __init__(self, dtype="float64"):
        self.new_dtype = dtype

    def __enter__(self):
        import SagLearn.core.backend.backend as backend
        self.prev_dtype = backend.DTYPE
        backend.set_dtype(self.new_dtype)
        return backend.DTYPE

    def __exit__(self, exc_type, exc_value, tb):
        import SagLearn.core.backend.backend as backend
        backend.DTYPE = self.prev_dtype
