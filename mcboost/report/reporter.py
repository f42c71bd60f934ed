import os
import ujson
import numpy as np
import matplotlib.pyplot as plt


def confusion_matrix(label, prediction):
    """

    Counts of (true label, predicted label) pairs

    Returns:
        classes : sorted list of every label seen in either vector
        matrix : numpy int array, rows are true labels, columns predictions

    """
    classes = np.unique(np.concatenate([label, prediction]))
    position = dict((c, i) for i, c in enumerate(classes))
    matrix = np.zeros([classes.size, classes.size], dtype = "int64")
    for t, p in zip(label, prediction):
        matrix[position[t], position[p]] += 1
    return [int(c) for c in classes], matrix


def staged_error(label, predictions):
    """
    Misclassification rate of every column of an examples x classifiers
    prediction matrix
    """
    if predictions.shape[0] == 0:
        return np.zeros(predictions.shape[1])
    return np.mean(predictions != label[:, np.newaxis], axis = 0)


class Reporter():
    def __init__(self, mb, main_process, xval_processes = ()):
        """

        Set up the environment for post-process

        mb
            MCBoost object containing global variables for the whole program
        main_process
            Process trained on the whole training set
        xval_processes
            Processes trained on cross validation folds

        """
        self.mb = mb
        self.train_label = mb.train_label
        self.test_label = mb.test_label
        self.statistics = main_process.get_statistics()
        self.classifier_no = len(self.statistics)

        """default values None. Over-ridden if necessary"""
        self.test_predictions = None
        self.test_error = None
        self.validation_predictions = None
        self.validation_error = None

        self.train_predictions = main_process.train_predictions
        self.train_error = staged_error(self.train_label,
                                        self.train_predictions)

        if self.mb.xvalEN:
            self.validation_predictions = np.zeros(
                                          [self.mb.total_exam_no,
                                           self.classifier_no],
                                          dtype = "int64")
            for process in xval_processes:
                self.validation_predictions[process.val_indices, :] = (
                                                    process.val_predictions)
            self.validation_error = staged_error(self.train_label,
                                                 self.validation_predictions)

        if self.mb.testEN:
            self.test_predictions = main_process.test_predictions
            self.test_error = staged_error(self.test_label,
                                           self.test_predictions)

        self.out_fp = str(self.mb.wd + 'out_' + str(self.mb.conf_num) + '/')
        self._create_dir()

    def _create_dir(self):
        if not os.path.exists(self.out_fp):
            os.makedirs(self.out_fp)

    def summary(self):
        """
        Returns a json serializable dictionary of the results
        """
        d = dict()
        d['meta'] = {'working_dir': self.mb.wd,
                     'conf_num': self.mb.conf_num,
                     'classifier_no': self.classifier_no,
                     'train_exam_no': self.mb.total_exam_no,
                     'test_exam_no': self.mb.test_exam_no,
                     'testEN': self.mb.testEN,
                     'xval_no': self.mb.xval_no,
                     'xvalEN': self.mb.xvalEN}
        d['classifiers'] = [{'classifier': c,
                             'weight': float(w),
                             'training_error': float(e)}
                            for (c, w, e) in self.statistics]
        d['train_error'] = self.train_error.tolist()
        classes, matrix = confusion_matrix(self.train_label,
                                           self.train_predictions[:, -1])
        d['train_confusion'] = {'classes': classes,
                                'matrix': matrix.tolist()}
        if self.mb.xvalEN:
            d['validation_error'] = self.validation_error.tolist()
            d['xval_indices'] = self.mb.xval_indices.tolist()
        if self.mb.testEN:
            d['test_error'] = self.test_error.tolist()
            classes, matrix = confusion_matrix(self.test_label,
                                               self.test_predictions[:, -1])
            d['test_confusion'] = {'classes': classes,
                                   'matrix': matrix.tolist()}
        return d

    def dump(self):
        """
        Dumps in the output directory a set of information
        that can be used by any computer later on to reproduce the graphs.
        """
        dump_filename = self.out_fp + "summary.json"
        with open(dump_filename, 'w') as f:
            ujson.dump(self.summary(), f, indent = 2)
        return dump_filename

    def run(self):
        summary = self.summary()
        report_results(summary)
        plot_data(summary = summary,
                  basepath = self.out_fp,
                  only_save = self.mb.show_plots != 'y')
        self.dump()


def report_results(summary = None, filename = None):
    """
    Prints the per classifier statistics and the final errors
    """
    if filename:
        with open(filename, 'r') as f:
            summary = ujson.load(f)

    print("Info : Weak classifiers of the final ensemble :")
    for i, c in enumerate(summary['classifiers']):
        print("  %3i  %-40s vote weight %8.4f  training error %0.4f" % (
              i, c['classifier'], c['weight'], c['training_error']))
    print("Info : Training Error of the final classifier : " +
          str(summary['train_error'][-1]))
    if 'validation_error' in summary:
        print("Info : Validation Error of the final classifier : " +
              str(summary['validation_error'][-1]))
    if 'test_error' in summary:
        print("Info : Testing Error of the final classifier : " +
              str(summary['test_error'][-1]))
        print("Info : Confusion matrix for testing error, classes " +
              str(summary['test_confusion']['classes']) + " :")
        print(np.array(summary['test_confusion']['matrix']))
    else:
        print("Info : Confusion matrix for training error, classes " +
              str(summary['train_confusion']['classes']) + " :")
        print(np.array(summary['train_confusion']['matrix']))


def plot_data(summary = None,
              filename = None,
              basepath = None,
              only_save = True):
    """
    Stand-alone method that can be used to plot the data.
    It takes information either from a summary file or a summary dictionary.

    Saves training_err.png, error vs. number of classifiers, and
    classifiers.png, vote weight and training error of each classifier.
    """
    if filename:
        with open(filename, 'r') as f:
            summary = ujson.load(f)
        if not basepath:
            filepath = os.path.realpath(os.path.expanduser(filename))
            head, tail = os.path.split(filepath)
            basepath = head + '/'
    elif not basepath:
        basepath = summary['meta']['working_dir']

    rounds = range(1, len(summary['train_error']) + 1)

    plt.figure()
    plt.plot(rounds, summary['train_error'], label = 'training error')
    if 'validation_error' in summary:
        plt.plot(rounds, summary['validation_error'],
                 label = 'validation error')
    if 'test_error' in summary:
        plt.plot(rounds, summary['test_error'], label = 'testing error')
    plt.xlabel('number of classifiers')
    plt.ylabel('error')
    plt.title('Error vs. Number of Classifiers')
    plt.legend()
    plt.savefig(basepath + "training_err.png")

    weights = [c['weight'] for c in summary['classifiers']]
    errors = [c['training_error'] for c in summary['classifiers']]
    plt.figure()
    plt.subplot(2, 1, 1)
    plt.bar(rounds, weights)
    plt.ylabel('vote weight')
    plt.title('Weak Classifiers')
    plt.subplot(2, 1, 2)
    plt.bar(rounds, errors)
    plt.xlabel('classifier')
    plt.ylabel('training error')
    plt.savefig(basepath + "classifiers.png")

    if not only_save:
        plt.show()
    plt.close('all')
