import argparse
import h5py
import numpy as np

'''
Synthetic dataset for the demo configurations

Three gaussian blobs in two dimensions, labels 0, 1 and 2.
Writes ``data`` (examples x features) and ``label`` datasets.
'''


def make_blobs(exam_no, seed=None):
    rs = np.random.RandomState(seed)
    centers = np.array([[0.0, 0.0], [3.0, 0.5], [1.5, 3.0]])
    label = np.resize(np.arange(centers.shape[0]), exam_no)
    rs.shuffle(label)
    data = centers[label] + rs.normal(scale=0.8, size=(exam_no, 2))
    return data, label


def write_dataset(fp, exam_no, seed=None):
    data, label = make_blobs(exam_no, seed=seed)
    with h5py.File(fp, 'w') as f:
        f.create_dataset('data', data=data)
        f.create_dataset('label', data=label)
    return fp


if __name__ == '__main__':
    argparser = argparse.ArgumentParser(
                description='Writes the demo train and test datasets')
    argparser.add_argument('--working_dir', '-wd',
                           type=str,
                           default='./',
                           help='Directory to write the datasets into')
    args = argparser.parse_args()
    wd = args.working_dir.rstrip('/') + '/'
    write_dataset(wd + 'blobs_train.h5', 300, seed=0)
    write_dataset(wd + 'blobs_test.h5', 150, seed=1)
