from .errors import (ReconstructionError, InputFormatError, DecodeError, InsufficientSamplesError,
                     InvalidSampleError, SingularInputError, DuplicateXError)
from .decoder import decode
from .samples import Sample, SampleSet, ShareEntry, ShareInput, build, build_sample_set, share_input_from_document
from .lagrange import evaluate_at_zero
from .newton import solve
from .solver import Reconstruction, reconstruct
