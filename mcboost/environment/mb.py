import h5py
import os
import time
import numpy as np
from datetime import datetime
from mcboost.boost.instance import Instance
from mcboost.boost.process import Process
from mcboost.report.reporter import Reporter
from mcboost.utility import parser


class MCBoost():
    def __init__(self,
                 conf_dict = None,
                 conf_num = None,
                 conf_path = "./",
                 debugEN = False,
                 logEN = True,
                 ):
        """

        Set up the environment for a mcboost job


        Parameters
        ----------
        conf_dict : dictionary, optional
            Configuration fields, takes precedence over conf_num

        conf_num : integer
            Configuration number

        conf_path : String, optional
            Path to configuration file

        debugEN : boolean, optional
            Flag to keep intermediate output and log every boosting decision

        logEN : boolean, optional
            Flag to enable logging

        """
        if conf_dict is not None:
            self.conf_dict = parser.set_defaults(dict(conf_dict))
        elif conf_num is not None:
            self.conf_dict = parser.get_configuration(conf_num = conf_num,
                                                      conf_path = conf_path)
        else:
            raise Exception('Error : Configuration dictionary or ' +
                            'configuration number should be specified.')
        self.conf_num = self.conf_dict['conf_num']
        self.testEN = self.conf_dict['test_file'] is not None
        self.xvalEN = self.conf_dict['xval_no'] != 1
        self.xval_no = self.conf_dict['xval_no']
        self.wd = self.conf_dict['working_dir']

        self.classifiers = self.conf_dict['classifiers']
        self.max_retries = self.conf_dict['max_retries']
        self.beta = self.conf_dict['beta']
        self.seed = self.conf_dict['seed']
        self.show_plots = self.conf_dict['show_plots']

        self.logEN = logEN
        self.debugEN = debugEN

        """Filepath to the training dataset"""
        self.train_fp = self.wd + self.conf_dict['train_file']
        self.train_set = self.get_instances(source = 'train')
        self.train_label = np.array([inst.label for inst in self.train_set])
        self.total_exam_no = len(self.train_set)
        if self.total_exam_no == 0:
            raise Exception("Error : Training dataset " + self.train_fp +
                            " has no examples.")

        self.test_fp = None
        self.test_set = None
        self.test_label = None
        self.test_exam_no = None

        """If test dataset is given, calculate related parameters"""
        if self.testEN:
            self.test_fp = self.wd + self.conf_dict['test_file']
            self.test_set = self.get_instances(source = 'test')
            self.test_label = np.array([inst.label for inst in self.test_set])
            self.test_exam_no = len(self.test_set)

        self.xval_indices = None

    def get_data(self, source = 'train'):
        """

        Returns the data matrix and the label from a dataset

        Parameters
        ----------
        source : String, optional
            The source of the data, "train" or "test"

        """
        if source == 'train':
            fp = self.train_fp
        elif source == 'test':
            fp = self.test_fp
        else:
            raise Exception('Error : Unknown source. Should give train' +
                            ' or test as source')
        if not os.path.exists(fp):
            raise Exception("Error : Data file " + fp + " does not exist.")

        with h5py.File(fp, 'r') as f:
            data = np.float64(f['data'][:])
            if data.ndim == 1:
                data = data[:, np.newaxis]
            try:
                label = np.int64(f['label'][:])
            except KeyError:
                print(datetime.now(), "Warning : The " + source +
                      " label does not exist. Using last column.")
                label = np.int64(data[:, -1])
                data = data[:, :-1]
        if label.shape[0] != data.shape[0]:
            raise Exception("Error : " + fp + " has " + str(data.shape[0]) +
                            " examples but " + str(label.shape[0]) +
                            " labels.")
        return data, label

    def get_instances(self, source = 'train'):
        data, label = self.get_data(source = source)
        return [Instance(features = data[i], label = label[i])
                for i in range(data.shape[0])]

    def set_xval_indices(self, ds_name = 'indices'):
        """

        Reads fold indices in 1..xval_no from the training file, or
        creates them randomly if they are missing or incompatible

        """
        if self.xval_no > self.total_exam_no:
            raise Exception("Error : Too many folds for the given " +
                            "dataset size.")
        indices = None
        with h5py.File(self.train_fp, 'r') as f:
            if ds_name in f:
                indices = np.int64(f[ds_name][:])
                if (indices.shape[0] != self.total_exam_no or
                    np.amax(indices) != self.xval_no or
                    np.amin(indices) < 1):
                    s = "Warning : Given xval indices are not compatible "
                    s = s + "with xval no. Randomly creating indices."
                    print(datetime.now(), s)
                    indices = None
            else:
                s = "Warning : Xval indices are not found in the datafile. "
                s = s + "Randomly creating indices."
                print(datetime.now(), s)
        if indices is None:
            indices = np.resize(np.arange(1, self.xval_no + 1),
                                self.total_exam_no)
            np.random.RandomState(self.seed).shuffle(indices)
        self.xval_indices = indices

    def run(self):
        """

        Runs the mcboost job

        """
        tstart = time.time()
        if self.logEN:
            msg = "Info : Mcboost is running for configuration number : "
            msg = msg + str(self.conf_num)
            print(datetime.now(), msg)

        if self.xvalEN:
            self.set_xval_indices(ds_name = 'indices')
            jobs = np.arange(self.xval_no + 1)
        else:
            jobs = (0,)

        """Run boosting for each xval index"""
        processes = list()
        for xval_ind in jobs:
            boost_process = Process(mb = self,
                                    xval_ind = int(xval_ind)
                                    )
            if self.logEN:
                msg = "Info : Boosting process is created for xval index "
                msg = msg + str(xval_ind)
                print(datetime.now(), msg)

            boost_process.run()
            if self.logEN:
                msg = "Info : Boosting computation is finished xval index "
                msg = msg + str(xval_ind)
                print(datetime.now(), msg)
            processes.append(boost_process)

        """Report the results"""
        reporter = Reporter(mb = self,
                            main_process = processes[0],
                            xval_processes = processes[1:])
        if self.logEN:
            msg = "Info : Reporter is created."
            print(datetime.now(), msg)

        reporter.run()
        if self.logEN:
            msg = "Info : Reporter finished running."
            print(datetime.now(), msg)
            tfinish = time.time()
            delta = tfinish - tstart
            msg = "Info : Total runtime : %0.2f seconds" % (delta,)
            print(datetime.now(), msg)
        return reporter
