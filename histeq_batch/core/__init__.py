from .batch_manager import ProcessResult, compute_variants, process_image, run_batch

__all__ = ['ProcessResult', 'compute_variants', 'process_image', 'run_batch']
