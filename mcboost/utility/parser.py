"""
Configuration parser module
Configuration files are specified in INI format, with different "sections" corresponding
to particular configuration numbers.
"""

import configparser
import os

required_options = ('train_file', 'test_file', 'classifiers',
                    'max_retries', 'beta', 'seed', 'xval_no',
                    'working_dir', 'show_plots'
                    )


def get_configuration(conf_num, conf_path = "./configurations.cfg"):
    """
    Parse the different fields of the configuration file, and
    store them in a dictionary.
    """
    config = configparser.ConfigParser(allow_no_value=True)
    if not config.read(conf_path):
        raise Exception("Error : Configuration file " + str(conf_path) +
                        " cannot be read.")
    section = "Configuration " + str(conf_num)
    if not config.has_section(section):
        raise Exception("Error : There is not any configuration with the " +
                        "specified number. Please choose another number.")
    my_dict = dict.fromkeys(required_options)
    arbitrary = dict()
    for option in config.options(section):
        if option in required_options:
            my_dict[option] = config.get(section, option)
        else:
            arbitrary[option] = config.get(section, option)
    my_dict['arbitrary'] = arbitrary
    my_dict['conf_num'] = conf_num
    return set_defaults(my_dict)


def set_defaults(my_dict):
    """
    Fill in missing fields and convert the numerical ones.
    Make sure the working directory is appended with '/' at the end.
    """
    for option in required_options:
        if my_dict.get(option) == '':
            my_dict[option] = None
        my_dict.setdefault(option, None)
    my_dict.setdefault('arbitrary', dict())
    my_dict.setdefault('conf_num', 0)

    if my_dict['train_file'] is None:
        raise Exception("Error : ``train_file`` input is mandatory.")

    if my_dict['classifiers'] is None:
        """Set default behavior"""
        my_dict['classifiers'] = ("stump",)
    elif isinstance(my_dict['classifiers'], str):
        my_dict['classifiers'] = tuple(
                    x.strip(' ') for x in my_dict['classifiers'].split(',')
                    if x.strip(' '))
    if len(my_dict['classifiers']) == 0:
        raise Exception("Error : Configuration field ``classifiers`` "
                        "must name at least one weak classifier.")

    if my_dict['max_retries'] is None:
        my_dict['max_retries'] = 1000
    elif str(my_dict['max_retries']).strip().lower() == 'none':
        my_dict['max_retries'] = None
    else:
        try:
            my_dict['max_retries'] = int(my_dict['max_retries'])
        except ValueError:
            raise Exception("Error : Configuration field ``max_retries`` "
                            "must be an integer or none.")
        if my_dict['max_retries'] < 0:
            raise Exception("Error : Configuration field ``max_retries`` "
                            "must not be negative.")

    if my_dict['beta'] is None:
        my_dict['beta'] = 1.5
    try:
        my_dict['beta'] = float(my_dict['beta'])
    except ValueError:
        raise Exception("Error : Configuration field ``beta`` must be "
                        "an integer or floating point number.")
    if my_dict['beta'] <= 0:
        raise Exception("Error : Configuration field ``beta`` "
                        "must be positive.")

    if my_dict['seed'] is not None:
        try:
            my_dict['seed'] = int(my_dict['seed'])
        except ValueError:
            raise Exception("Error : Configuration field ``seed`` "
                            "must be an integer.")

    if my_dict['xval_no'] is None:
        my_dict['xval_no'] = 1
    try:
        my_dict['xval_no'] = int(my_dict['xval_no'])
    except ValueError:
        raise Exception("Error : Configuration field ``xval_no`` "
                        "must be an integer.")
    if my_dict['xval_no'] <= 0:
        raise Exception("Error : Configuration field ``xval_no`` "
                        "must be positive.")

    if my_dict['working_dir'] is None:
        my_dict['working_dir'] = "./"
    my_dict['working_dir'] = os.path.realpath(
                        os.path.expanduser(str(my_dict['working_dir']).strip()))

    if my_dict['show_plots'] is None:
        my_dict['show_plots'] = 'n'
    if my_dict['show_plots'] not in ('y', 'n'):
        raise Exception("Error : Configuration field ``show_plots`` "
                        "must be y or n.")

    """Make sure the working directory is appended with '/' at the end."""
    if my_dict['working_dir'][-1] != '/':
        my_dict['working_dir'] = my_dict['working_dir'] + '/'

    return my_dict
